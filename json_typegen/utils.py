"""Utility functions for loading JSON input.

The command line front-end reads its sample document from a local file, a
URL or standard input. Every failure surfaces as ``JSONLoaderError``.
"""

import json
import sys
from pathlib import Path
from typing import Any, TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30


class JSONLoaderError(Exception):
    """Raised when JSON input cannot be read or parsed."""

    pass


def parse_json_text(text: str, source: str) -> Any:
    """Parse JSON text, naming the source in the error message.

    Args:
        text: Raw JSON text.
        source: Human readable origin of the text.

    Returns:
        The parsed JSON value.

    Raises:
        JSONLoaderError: If the text is empty or not valid JSON.
    """
    if not text.strip():
        raise JSONLoaderError(f"Empty JSON input from {source}")

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug(f"Invalid JSON from {source}: {e}")
        raise JSONLoaderError(f"Invalid JSON from {source}: {e}") from e


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If the file is missing, unreadable or not valid JSON.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load JSON from file: {file_path}")

    if not file_path.is_file():
        logger.debug(f"File not found: {file_path}")
        raise JSONLoaderError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e

    data = parse_json_text(text, str(file_path))
    logger.info(f"Successfully loaded JSON from {file_path}")
    return f"📄 {file_path}", data


def load_json_from_url(url: str, timeout: int = DEFAULT_TIMEOUT) -> tuple[str, Any]:
    """Load JSON data from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If the URL is invalid, the request fails, or the
            response isn't valid JSON.
    """
    logger.debug(f"Attempting to load JSON from URL: {url}")

    parsed_url = urlparse(url)
    if parsed_url.scheme not in ("http", "https") or not parsed_url.netloc:
        logger.debug(f"Invalid URL format: {url}")
        raise JSONLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.debug(f"Request timeout for URL: {url}")
        raise JSONLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.debug(f"Connection error for URL {url}: {e}")
        raise JSONLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "unknown"
        logger.debug(f"HTTP error {status} for URL: {url}")
        raise JSONLoaderError(f"HTTP error {status} for URL: {url}") from e
    except requests.exceptions.RequestException as e:
        logger.debug(f"Request error for URL {url}: {e}")
        raise JSONLoaderError(f"Request error for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "json" not in content_type and not parsed_url.path.endswith(".json"):
        logger.warning(f"URL {url} does not have JSON content type: {content_type}")

    data = parse_json_text(response.text, url)
    logger.info(f"Successfully loaded JSON from {url}")
    return f"🌐 {url}", data


def load_json_from_stdin(stream: TextIO | None = None) -> tuple[str, Any]:
    """Load JSON data from standard input (or another text stream).

    Args:
        stream: Stream to read; ``sys.stdin`` if None.

    Returns:
        Tuple of (source description, parsed JSON data).
    """
    stream = stream if stream is not None else sys.stdin
    logger.debug("Loading JSON from standard input")

    try:
        text = stream.read()
    except OSError as e:
        raise JSONLoaderError(f"Error reading standard input: {e}") from e

    return "📥 <stdin>", parse_json_text(text, "<stdin>")


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    stdin: bool = False,
    timeout: int = DEFAULT_TIMEOUT,
) -> tuple[str, Any]:
    """Load JSON data from exactly one of a file, a URL or standard input.

    Args:
        file_path: Path to local JSON file.
        url: URL to fetch JSON from.
        stdin: Read from standard input.
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If zero or several sources are given, or loading fails.
    """
    sources = [bool(file_path), bool(url), bool(stdin)]

    if not any(sources):
        raise JSONLoaderError("An input source is required (file, --url or --stdin)")

    if sum(sources) > 1:
        raise JSONLoaderError("Only one input source may be given")

    if file_path:
        return load_json_from_file(file_path)
    if url:
        return load_json_from_url(url, timeout)
    return load_json_from_stdin()
