"""Utility functions for loading and parsing JSON input.

This module provides functions for reading JSON text from files, URLs and
streams, and for decoding it with strict standard-JSON rules.
"""

import json
from pathlib import Path
from typing import Any, TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Custom exception for JSON loading errors."""

    pass


class ParseError(JSONLoaderError):
    """Raised when JSON text cannot be decoded."""

    def __init__(self, message: str, lineno: int | None = None, colno: int | None = None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json_text(text: str) -> Any:
    """Decode JSON text.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected since they are not
    part of standard JSON.

    Args:
        text: Raw JSON document.

    Returns:
        The decoded value.

    Raises:
        ParseError: If the text is not valid JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        logger.debug("JSON decode failed: %s", e)
        raise ParseError(str(e), lineno=e.lineno, colno=e.colno) from e
    except ValueError as e:
        logger.debug("JSON decode failed: %s", e)
        raise ParseError(str(e)) from e
    except RecursionError as e:
        logger.debug("JSON decode hit the recursion limit")
        raise ParseError("Document nests too deeply to parse") from e


def read_json_text_from_file(file_path: str | Path) -> tuple[str, str]:
    """Read raw JSON text from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, file content).

    Raises:
        FileNotFoundError: If file doesn't exist.
        JSONLoaderError: If file cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to read JSON from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")
        # Don't raise, just warn - might still be valid JSON

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Read {len(text)} characters from {file_path}")
    return f"📄 {file_path}", text


def read_json_text_from_url(url: str, timeout: int = 30) -> tuple[str, str]:
    """Fetch raw JSON text from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, response body).

    Raises:
        JSONLoaderError: If URL is invalid or the request fails.
    """
    logger.debug(f"Attempting to fetch JSON from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise JSONLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise JSONLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise JSONLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise JSONLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise JSONLoaderError(f"Request error for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "application/json" not in content_type and not url.endswith(".json"):
        logger.warning(f"URL {url} does not have JSON content type: {content_type}")

    logger.info(f"Fetched JSON text from {url}")
    return f"🌐 {url}", response.text


def read_json_text_from_stream(stream: TextIO) -> tuple[str, str]:
    """Read raw JSON text from an open text stream such as stdin."""
    return "⌨️ stdin", stream.read()


def read_json_text(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, str]:
    """Read raw JSON text from either a file or URL.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, raw text).

    Raises:
        JSONLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise JSONLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise JSONLoaderError("Cannot specify both file_path and url")

    if file_path:
        return read_json_text_from_file(file_path)
    else:
        return read_json_text_from_url(url, timeout)


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load and decode JSON data from either a file or URL.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        ParseError: If the content is not valid JSON.
        JSONLoaderError: If loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    source, text = read_json_text(file_path, url, timeout)
    return source, parse_json_text(text)
