"""
Interactive code generation handler.

"""

from pathlib import Path
from typing import Dict, Any, Optional

from rich.console import Console
from rich.prompt import Prompt, Confirm
from rich.panel import Panel
from rich.table import Table
from rich.syntax import Syntax
from rich import box

from . import GenerationResult, GeneratorConfig, generate_from_text, load_config
from .core.config import ConfigError
from .languages.dart import DART_PRESETS
from ..logging_config import get_logger
from ..utils import JSONLoaderError, read_json_text_from_file

logger = get_logger(__name__)


class CodegenInteractiveHandler:
    """Dedicated handler for interactive code generation."""

    def __init__(
        self,
        text: str,
        console: Console = None,
        config: Optional[GeneratorConfig] = None,
    ):
        """
        Initialize the codegen interactive handler.

        Args:
            text: Raw JSON input to generate code for
            console: Rich console instance (creates new if None)
            config: Starting settings (Dart defaults if None)
        """
        self.text = text
        self.console = console or Console()
        self.config: GeneratorConfig = config or load_config("dart")
        self.result: Optional[GenerationResult] = None

    def run_interactive(self) -> bool:
        """
        Run the interactive code generation interface.

        Returns:
            True when the user leaves normally, False on cancel
        """
        if not self.text:
            self.console.print("[red]❌ No data available for code generation[/red]")
            return False

        try:
            self.regenerate()
            while True:
                action = self._show_main_menu()

                if action == "quit":
                    return True
                elif action == "generate":
                    self.regenerate()
                elif action == "root":
                    self._change_root_name()
                elif action == "mode":
                    self.toggle_nullability()
                elif action == "json":
                    self.toggle_serialization_hooks()
                elif action == "preset":
                    self._apply_preset()
                elif action == "reload":
                    self._reload_input()
                elif action == "preview":
                    self._preview_code()
                elif action == "save":
                    self._save_code()
                elif action == "warnings":
                    self._display_warnings()

        except KeyboardInterrupt:
            self.console.print("\n[yellow]👋 Code generation cancelled[/yellow]")
            return False

    def regenerate(self) -> GenerationResult:
        """Generate from the current text and settings, replacing the last result."""
        self.result = generate_from_text(self.text, config=self.config)

        if self.result.success:
            self.console.print(
                f"[green]✅ Generated {self.result.metadata['class_count']} "
                f"class(es) for {self.result.metadata['root_class']}[/green]"
            )
            if self.result.warnings:
                self.console.print(
                    f"[yellow]⚠️ {len(self.result.warnings)} warning(s)[/yellow]"
                )
        else:
            self.console.print(
                f"[red]❌ Generation failed:[/red] {self.result.error_message}"
            )
        return self.result

    def set_root_name(self, root_name: str) -> GenerationResult:
        """Change the root class hint and regenerate."""
        self.config = self._with_overrides(root_name=root_name)
        return self.regenerate()

    def toggle_nullability(self) -> GenerationResult:
        """Switch between all-nullable and smart mode and regenerate."""
        self.config = self._with_overrides(
            all_fields_nullable=not self.config.all_fields_nullable
        )
        self.console.print(
            f"Nullability mode: [cyan]{self.config.nullability.value}[/cyan]"
        )
        return self.regenerate()

    def toggle_serialization_hooks(self) -> GenerationResult:
        """Turn the fromJson factory on or off and regenerate."""
        self.config = self._with_overrides(
            emit_serialization_hooks=not self.config.emit_serialization_hooks
        )
        state = "on" if self.config.emit_serialization_hooks else "off"
        self.console.print(f"fromJson factory: [cyan]{state}[/cyan]")
        return self.regenerate()

    def reload_from_file(self, path: str) -> GenerationResult:
        """Replace the input with a file's content and regenerate."""
        _, self.text = read_json_text_from_file(path)
        return self.regenerate()

    def save(self, path: Optional[Path] = None) -> Path:
        """
        Write the current code to disk.

        Args:
            path: Target file; defaults to the name derived from the root class

        Returns:
            Path written
        """
        if self.result is None or not self.result.success:
            raise ValueError("No generated code to save")

        output_path = Path(path or self.result.metadata["file_name"])
        output_path.write_text(self.result.code, encoding="utf-8")
        logger.info("Saved generated code to %s", output_path)
        return output_path

    def _with_overrides(self, **overrides) -> GeneratorConfig:
        values = {
            "root_name": self.config.root_name,
            "all_fields_nullable": self.config.all_fields_nullable,
            "emit_serialization_hooks": self.config.emit_serialization_hooks,
            "abstract_class": self.config.abstract_class,
            "header_comment": self.config.header_comment,
            "output_file": self.config.output_file,
            **self.config.custom,
        }
        values.update(overrides)
        return load_config("dart", custom_config=values)

    def _show_main_menu(self) -> str:
        """Show the main codegen menu and get user choice."""
        mode = self.config.nullability.value
        json_state = "on" if self.config.emit_serialization_hooks else "off"

        menu_panel = Panel.fit(
            f"""[bold blue]⚡ Freezed Generation Menu[/bold blue]

[dim]Root:[/dim] {self.config.root_name}  [dim]Mode:[/dim] {mode}  [dim]fromJson:[/dim] {json_state}

[cyan]1.[/cyan] 🚀 Regenerate
[cyan]2.[/cyan] 🏷️  Change root name
[cyan]3.[/cyan] ❓ Toggle nullability mode
[cyan]4.[/cyan] 🔁 Toggle fromJson factory
[cyan]5.[/cyan] 🎨 Apply preset
[cyan]6.[/cyan] 📂 Reload input from file
[cyan]7.[/cyan] 👀 Preview code
[cyan]8.[/cyan] 💾 Save code
[cyan]9.[/cyan] ⚠️  Show warnings
[cyan]q.[/cyan] 🔙 Quit""",
            border_style="blue",
            title="⚡ json2freezed",
        )

        self.console.print()
        self.console.print(menu_panel)

        choice = Prompt.ask(
            "\n[bold]Choose an option[/bold]",
            choices=["1", "2", "3", "4", "5", "6", "7", "8", "9", "q"],
            default="7",
        )

        choice_map = {
            "1": "generate",
            "2": "root",
            "3": "mode",
            "4": "json",
            "5": "preset",
            "6": "reload",
            "7": "preview",
            "8": "save",
            "9": "warnings",
            "q": "quit",
        }

        return choice_map.get(choice, "quit")

    def _change_root_name(self):
        root_name = Prompt.ask("Root class name", default=self.config.root_name)
        self.set_root_name(root_name)

    def _apply_preset(self):
        """Pick one of the Dart configuration presets."""
        table = Table(
            title="🎨 Presets", box=box.SIMPLE, show_header=True, header_style="bold cyan"
        )
        table.add_column("Preset", style="bold green")
        table.add_column("Settings", style="dim")
        for name, settings in DART_PRESETS.items():
            table.add_row(name, ", ".join(f"{k}={v}" for k, v in settings.items()))

        self.console.print()
        self.console.print(table)

        preset = Prompt.ask(
            "Select preset", choices=list(DART_PRESETS) + ["back"], default="back"
        )
        if preset == "back":
            return

        try:
            self.config = self._with_overrides(**DART_PRESETS[preset])
        except ConfigError as e:
            self.console.print(f"[red]❌ Error applying preset:[/red] {e}")
            return
        self.regenerate()

    def _reload_input(self):
        path = Prompt.ask("JSON file path")
        try:
            self.reload_from_file(path)
        except (FileNotFoundError, JSONLoaderError) as e:
            self.console.print(f"[red]❌ Error loading file:[/red] {e}")

    def _preview_code(self):
        """Preview generated code with syntax highlighting."""
        if self.result is None or not self.result.success:
            self.console.print("[yellow]Nothing to preview[/yellow]")
            return

        self.console.print(
            f"\n[green]📄 {self.result.metadata['file_name']} Preview[/green]"
        )
        syntax = Syntax(
            self.result.code, "dart", theme="monokai", line_numbers=False, padding=1
        )
        self.console.print()
        self.console.print(syntax)
        self.console.print()
        self._display_metadata(self.result.metadata)

    def _save_code(self):
        """Save generated code to a file chosen at the prompt."""
        if self.result is None or not self.result.success:
            self.console.print("[yellow]Nothing to save[/yellow]")
            return

        filename = Prompt.ask("Save as", default=self.result.metadata["file_name"])
        output_path = Path(filename)

        if output_path.exists():
            if not Confirm.ask(f"File {output_path} exists. Overwrite?", default=False):
                return

        try:
            self.save(output_path)
        except OSError as e:
            self.console.print(f"[red]❌ Error saving file:[/red] {e}")
            return
        self.console.print(f"[green]✅ Code saved to:[/green] [cyan]{output_path}[/cyan]")

    def _display_warnings(self):
        """Display generation warnings."""
        warnings = self.result.warnings if self.result else []
        if not warnings:
            self.console.print("[green]No warnings[/green]")
            return

        self.console.print("\n[yellow]⚠️ Warnings:[/yellow]")
        for warning in warnings:
            self.console.print(f"  [yellow]•[/yellow] {warning}")

    def _display_metadata(self, metadata: Dict[str, Any]):
        """Display generation metadata."""
        metadata_table = Table(
            title="📊 Generation Summary",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in metadata.items():
            display_key = key.replace("_", " ").title()
            metadata_table.add_row(display_key, str(value))

        self.console.print(metadata_table)
