"""
CLI integration for code generation functionality.

Adds the generation options to the command-line parser and turns parsed
arguments into a generated Dart file.
"""

import argparse
from pathlib import Path
from typing import Any, Dict

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from . import (
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    NullabilityMode,
    RegistryError,
    generate_from_text,
    list_all_language_info,
    load_config,
)
from .core.config import ConfigError, get_config_manager
from .core.schema import describe_type
from ..logging_config import get_logger

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()
error_console = Console(stderr=True)


def add_codegen_args(parser: argparse.ArgumentParser):
    """Add code generation arguments to an existing CLI parser."""
    codegen_group = parser.add_argument_group("code generation")

    codegen_group.add_argument(
        "--root-name",
        metavar="NAME",
        help="Name hint for the root class (default: Model)",
    )

    codegen_group.add_argument(
        "--mode",
        choices=[m.value for m in NullabilityMode],
        help="Nullability mode: every field nullable, or only null samples",
    )

    codegen_group.add_argument(
        "--no-json",
        action="store_true",
        help="Don't emit the fromJson factory",
    )

    codegen_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )

    codegen_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )

    output_group = parser.add_argument_group("output")
    output_target = output_group.add_mutually_exclusive_group()
    output_target.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )
    output_target.add_argument(
        "--save",
        action="store_true",
        help="Save to the file name derived from the root class",
    )

    output_group.add_argument(
        "--output-dir",
        metavar="DIR",
        default=".",
        help="Directory used with --save (default: current directory)",
    )

    output_group.add_argument(
        "--raw",
        action="store_true",
        help="Print plain code without highlighting or decoration",
    )

    output_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation metadata and the inferred classes",
    )


def handle_codegen_command(args: argparse.Namespace, text: str) -> int:
    """
    Handle code generation from CLI arguments.

    Args:
        args: Parsed command line arguments
        text: Raw JSON input

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    messages = message_console(args)
    try:
        config = build_config(args)
        _print_warnings(
            "Configuration warnings",
            get_config_manager().validate_config(config),
            args,
        )
        result = _generate(text, config, args)
        return _output_result(result, args)

    except CLIError as e:
        messages.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except (ConfigError, RegistryError, GeneratorError) as e:
        logger.error("Code generation failed: %s", e)
        messages.print(f"[red]✗[/red] {e}")
        return 1


def message_console(args: argparse.Namespace) -> Console:
    """Console for status and error messages; stderr when code goes to stdout raw."""
    return error_console if getattr(args, "raw", False) else console


def list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] json2freezed [dim]input.json[/dim] "
            "--root-name [cyan]User[/cyan] --mode [cyan]smart[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI overrides."""
    overrides: Dict[str, Any] = {}

    if getattr(args, "root_name", None):
        overrides["root_name"] = args.root_name

    if getattr(args, "mode", None):
        overrides["nullability"] = args.mode

    if getattr(args, "no_json", False):
        overrides["emit_serialization_hooks"] = False

    if getattr(args, "output", None):
        overrides["output_file"] = args.output

    try:
        return load_config(
            "dart",
            custom_config=overrides,
            config_file=getattr(args, "config", None),
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def resolve_output_path(result: GenerationResult, args: argparse.Namespace):
    """Return the file the result goes to, or None for stdout."""
    if getattr(args, "output", None):
        return Path(args.output)
    if getattr(args, "save", False):
        return Path(getattr(args, "output_dir", ".")) / result.metadata["file_name"]
    return None


def _generate(
    text: str, config: GeneratorConfig, args: argparse.Namespace
) -> GenerationResult:
    """Run generation, with a spinner unless raw output was requested."""
    if getattr(args, "raw", False):
        return generate_from_text(text, config=config)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("[green]Generating Freezed classes...", total=None)
        return generate_from_text(text, config=config)


def _output_result(result: GenerationResult, args: argparse.Namespace) -> int:
    """Write or print the generated code, then metadata and warnings."""
    messages = message_console(args)
    if not result.success:
        messages.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    output_path = resolve_output_path(result, args)
    if output_path is not None:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            messages.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        logger.info("Wrote %s", output_path)
        console.print(
            f"[green]✓[/green] Generated Dart code saved to [cyan]{output_path}[/cyan]"
        )
    elif getattr(args, "raw", False):
        print(result.code)
    else:
        top_border = "═" * 20
        console.print(
            f"[green]{top_border} 📄 {result.metadata['file_name']} {top_border}[/green]\n"
        )
        console.print(Syntax(result.code, "dart", theme="monokai"))
        console.print(f"\n[green]{top_border * 3}[/green]")

    if getattr(args, "verbose", False):
        _print_metadata(result)

    _print_warnings("Warnings", result.warnings, args)
    return 0


def _print_warnings(title: str, warnings, args: argparse.Namespace):
    if not warnings:
        return
    messages = message_console(args)
    messages.print(f"\n[yellow]⚠️  {title}:[/yellow]")
    for warning in warnings:
        messages.print(f"  [yellow]•[/yellow] {warning}")


def _print_metadata(result: GenerationResult):
    """Print generation metadata and the inferred classes."""
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    classes_table = Table(
        title="🧩 Inferred Classes",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    classes_table.add_column("Class", style="bold green")
    classes_table.add_column("Field")
    classes_table.add_column("JSON Key", style="dim")
    classes_table.add_column("Type", style="cyan")
    classes_table.add_column("Nullable")

    for class_spec in result.classes:
        if not class_spec.fields:
            classes_table.add_row(class_spec.name, "[dim]none[/dim]", "", "", "")
        for index, field in enumerate(class_spec.fields):
            classes_table.add_row(
                class_spec.name if index == 0 else "",
                field.name,
                field.original_key,
                describe_type(field.type),
                "yes" if field.nullable else "no",
            )

    console.print()
    console.print(metadata_table)
    console.print(classes_table)
