"""
Command line front-end for json-typegen.

Reads a sample JSON document, infers its types and prints type definitions
in the requested language.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.syntax import Syntax

from .codegen import (
    ConfigError,
    GeneratorError,
    RegistryError,
    build_options,
    generate_code,
    get_generator,
    get_registry,
    output_filename,
)
from .codegen.core.config import options_to_dict
from .codegen.registry import get_language_info, list_all_language_info
from .logging_config import get_logger
from .utils import JSONLoaderError, load_json

logger = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the json-typegen command."""
    parser = argparse.ArgumentParser(
        prog="json-typegen",
        description="Generate type definitions from sample JSON data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  json-typegen data.json --language typescript --root-name Person
  json-typegen -l go --set package_name=models -o models.go data.json
  curl -s https://api.example.com/user | json-typegen --stdin -l rust
  json-typegen --list-languages
  json-typegen --show-defaults -l java
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="JSON file to read")
    input_group.add_argument("--url", help="URL to fetch JSON from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read JSON from standard input"
    )

    parser.add_argument("--language", "-l", help="Target language (or alias)")
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")

    options_group = parser.add_argument_group("generation options")
    options_group.add_argument("--config", help="JSON file with generator options")
    options_group.add_argument("--root-name", help="Name of the root type (default: Root)")
    options_group.add_argument(
        "--optional",
        action="store_true",
        help="Mark every property as optional",
    )
    options_group.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Set a generator option; VALUE is parsed as JSON when possible",
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--show-defaults",
        action="store_true",
        help="Show the default options of --language and exit",
    )

    diag_group = parser.add_argument_group("diagnostics")
    diag_group.add_argument(
        "--verbose", "-v", action="store_true", help="Show generation metadata"
    )
    diag_group.add_argument(
        "--log-level", choices=LOG_LEVELS, type=str.upper, help="Logging level"
    )
    diag_group.add_argument("--log-file", help="Also write logs to this file")

    return parser


def parse_overrides(pairs: List[str]) -> Dict[str, Any]:
    """
    Parse ``KEY=VALUE`` pairs into an options dictionary.

    Values that parse as JSON (``true``, ``4``, ``"x"``) keep their JSON
    type; anything else is taken as a plain string.
    """
    overrides = {}
    for pair in pairs:
        key, sep, raw_value = pair.partition("=")
        if not sep or not key.strip():
            raise CLIError(f"Invalid --set value '{pair}' (expected KEY=VALUE)")
        try:
            value = json.loads(raw_value)
        except json.JSONDecodeError:
            value = raw_value
        overrides[key.strip()] = value
    return overrides


def run(args: argparse.Namespace) -> int:
    """
    Execute the command described by parsed arguments.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        if args.list_languages:
            return _list_languages()

        if not args.language:
            raise CLIError("--language is required (use --list-languages to see options)")

        language = get_registry().resolve(args.language)

        if args.show_defaults:
            return _show_defaults(language)

        options = _build_options(args, language)
        source, data = load_json(file_path=args.file, url=args.url, stdin=args.stdin)
        logger.info("Generating %s code from %s", language, source)
        return _generate_and_output(data, language, options, args)

    except (CLIError, ConfigError, RegistryError, JSONLoaderError, GeneratorError) as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}", highlight=False)
        return 1


def _build_options(args: argparse.Namespace, language: str):
    """Merge --config, --set, --root-name and --optional into an option record."""
    overrides = parse_overrides(args.overrides)

    if args.root_name:
        overrides["root_name"] = args.root_name
    if args.optional:
        overrides["optional_properties"] = True

    options_class = get_registry().get_generator_class(language).options_class
    return build_options(options_class, overrides, config_file=args.config)


def _list_languages() -> int:
    """Print the supported languages as a table."""
    table = Table(title="Supported Languages", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Label")
    table.add_column("Extension", style="cyan")
    table.add_column("Aliases", style="blue")

    for name, info in sorted(list_all_language_info().items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "-"
        table.add_row(name, info["label"], info["file_extension"], aliases)

    console.print(table)
    return 0


def _show_defaults(language: str) -> int:
    """Print the default options of one language."""
    info = get_language_info(language)
    defaults = options_to_dict(get_generator(language).options)

    table = Table(
        title=f"{info['label']} default options",
        box=box.SIMPLE,
        header_style="bold cyan",
    )
    table.add_column("Option", style="bold")
    table.add_column("Default", style="green")

    for key, value in defaults.items():
        table.add_row(key, json.dumps(value))

    console.print(table)
    return 0


def _generate_and_output(
    data: Any, language: str, options, args: argparse.Namespace
) -> int:
    """Generate code and write it to a file or stdout."""
    generator = get_generator(language, options)
    result = generate_code(generator, data)

    if not result.success:
        err_console.print(
            f"[red]✗ {escape(result.error_message)}[/red]", highlight=False
        )
        return 1

    for warning in result.warnings:
        logger.warning(warning)

    if args.output:
        output_path = _resolve_output_path(args.output, options.root_name, language)
        try:
            output_path.write_text(result.code + "\n", encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write to {output_path}: {e}") from e
        err_console.print(f"[green]✓[/green] Saved {language} code to [cyan]{output_path}[/cyan]")
    else:
        _print_code(result.code, get_language_info(language)["lexer"])

    if args.verbose:
        _print_metadata(result.metadata, result.warnings)

    return 0


def _resolve_output_path(output: str, root_name: str, language: str) -> Path:
    """A directory as --output receives the default file name."""
    path = Path(output)
    if path.is_dir():
        return path / output_filename(root_name, language)
    return path


def _print_code(code: str, lexer: str) -> None:
    """Print code highlighted on a terminal, verbatim otherwise."""
    if not code:
        logger.info("No object types found; nothing generated")
        return

    if console.is_terminal:
        console.print(Syntax(code, lexer, theme="monokai"))
    else:
        sys.stdout.write(code + "\n")


def _print_metadata(metadata: Dict[str, Any], warnings: Optional[List[str]] = None) -> None:
    table = Table(
        title="Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Property", style="bold")
    table.add_column("Value", style="green")

    for key, value in metadata.items():
        table.add_row(key.replace("_", " ").title(), str(value))

    err_console.print(table)

    if warnings:
        err_console.print("[yellow]Warnings:[/yellow]")
        for warning in warnings:
            err_console.print(f"  [yellow]•[/yellow] {escape(warning)}", highlight=False)
