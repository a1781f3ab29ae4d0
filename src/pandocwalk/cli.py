#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for running pandocwalk filters.

Pandoc runs a filter as an executable, passing the target format as the
first argument and the JSON document on standard input. The ``pandocwalk``
command follows that protocol, so it can be used with ``--filter`` directly
once a default filter is configured, or wrapped in one of the
``pandocwalk-<name>`` console scripts.

Examples
--------
Run a named filter on a JSON document::

    $ pandoc -t json book.md | pandocwalk latex --filter leanpub | pandoc -f json -o book.pdf

Read from and write to files::

    $ pandocwalk html --filter manuscript --input story.json --output clean.json

Pass filter options::

    $ pandocwalk --filter manuscript -O header_level=3 < story.json

List available filters::

    $ pandocwalk --list-filters --rich

Use a configuration file (.pandocwalk.toml)::

    filter = "leanpub"

    [filter_options.leanpub]
    default_format = "html"

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml

from pandocwalk.config import get_filter_options, load_config_with_priority, merge_configs
from pandocwalk.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_CONFIG_PATH,
    EXIT_FILTER_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from pandocwalk.document import apply_action, dump_document, load_document, to_json_filter
from pandocwalk.exceptions import MalformedDocumentError, PandocWalkError
from pandocwalk.filters import filter_registry
from pandocwalk.logging_utils import LogSettings, configure_logging

logger = logging.getLogger(__name__)

__all__ = [
    "create_parser",
    "main",
    "parse_option",
    "run_filter_main",
]


def _get_version() -> str:
    """Get the version of pandocwalk package."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("pandocwalk")
    except PackageNotFoundError:
        return "unknown"


def parse_option(value: str) -> tuple[str, Any]:
    """Parse a ``KEY=VALUE`` filter option.

    The value is read as a YAML scalar, so ``3`` is an int, ``true`` a bool
    and anything else a string.

    Raises
    ------
    argparse.ArgumentTypeError
        If value has no ``=`` or an empty key

    Examples
    --------
    >>> parse_option("header_level=3")
    ('header_level', 3)
    >>> parse_option("default_format=html")
    ('default_format', 'html')

    """
    key, sep, raw = value.partition("=")
    key = key.strip()
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Filter option must be KEY=VALUE, got: {value}")
    try:
        parsed = yaml.safe_load(raw) if raw.strip() else ""
    except yaml.YAMLError:
        parsed = raw
    if isinstance(parsed, (dict, list)) or parsed is None:
        parsed = raw
    return key, parsed


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``pandocwalk`` command."""
    parser = argparse.ArgumentParser(
        prog="pandocwalk",
        description="Rewrite a pandoc JSON document with a filter action.",
        epilog=f"Configuration is read from --config, ${ENV_CONFIG_PATH}, or a discovered .pandocwalk.toml.",
    )
    parser.add_argument(
        "format",
        nargs="?",
        default=None,
        help="Target output format passed by pandoc (e.g. latex, html, epub)",
    )
    parser.add_argument("-f", "--filter", dest="filter_name", help="Name of the filter to run")
    parser.add_argument("-i", "--input", help="Read the JSON document from this file instead of stdin")
    parser.add_argument("-o", "--output", help="Write the JSON document to this file instead of stdout")
    parser.add_argument(
        "-O",
        "--option",
        dest="options",
        action="append",
        type=parse_option,
        default=[],
        metavar="KEY=VALUE",
        help="Filter option, may be repeated",
    )
    parser.add_argument("--config", help="Path to a configuration file (.toml, .yaml, .json)")
    parser.add_argument("--list-filters", action="store_true", help="List available filters and exit")
    parser.add_argument("--rich", action="store_true", help="Use rich formatting for --list-filters")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_version()}")
    return parser


def _list_filters(use_rich: bool) -> None:
    names = filter_registry.list_filters()

    if use_rich:
        from rich.console import Console
        from rich.table import Table

        table = Table(title="Available filters")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Description")
        table.add_column("Options", style="green")
        for name in names:
            metadata = filter_registry.get_metadata(name)
            options = "\n".join(f"{key}={spec.default!r}" for key, spec in metadata.parameters.items())
            table.add_row(name, metadata.description, options)
        Console().print(table)
        return

    for name in names:
        metadata = filter_registry.get_metadata(name)
        print(f"{name:<16} {metadata.description}")
        for key, spec in metadata.parameters.items():
            print(f"{'':<16}   {key}={spec.default!r}  {spec.help}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the ``pandocwalk`` command.

    Parameters
    ----------
    argv : sequence of str, optional
        Arguments without the program name, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config_with_priority(args.config, os.environ.get(ENV_CONFIG_PATH))
        configure_logging(LogSettings.resolve(config, args))
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if args.list_filters:
        _list_filters(args.rich)
        return EXIT_SUCCESS

    filter_name = args.filter_name or config.get("filter")
    if not filter_name:
        logger.error("No filter given. Use --filter NAME or set 'filter' in the configuration file.")
        return EXIT_VALIDATION_ERROR

    target_format = args.format if args.format is not None else str(config.get("format", ""))

    try:
        options = merge_configs(get_filter_options(config, filter_name), dict(args.options))
        action = filter_registry.get_action(filter_name, **options)
    except KeyError:
        logger.error(f"Unknown filter '{filter_name}'. Available: {', '.join(filter_registry.list_filters())}")
        return EXIT_VALIDATION_ERROR
    except (argparse.ArgumentTypeError, ValueError) as e:
        logger.error(str(e))
        return EXIT_VALIDATION_ERROR

    logger.info(f"Running filter '{filter_name}' for format '{target_format}'")

    try:
        doc = load_document(Path(args.input) if args.input else sys.stdin)
        altered = apply_action(doc, action, target_format)
    except MalformedDocumentError as e:
        logger.error(f"Malformed input document: {e.message}")
        return EXIT_INPUT_ERROR
    except PandocWalkError as e:
        logger.error(f"Filter '{filter_name}' failed: {e.message}")
        return EXIT_FILTER_ERROR
    except Exception as e:
        logger.error(f"Filter '{filter_name}' failed: {type(e).__name__}: {e}", exc_info=args.trace)
        return EXIT_FILTER_ERROR

    # Written only after the walk succeeded, so a failed run leaves no partial output
    text = dump_document(altered) + "\n"
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        logger.info(f"Wrote {args.output}")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()

    return EXIT_SUCCESS


def run_filter_main(filter_name: str, argv: Optional[Sequence[str]] = None) -> int:
    """Run one registered filter with the plain pandoc filter protocol.

    Used by the ``pandocwalk-<name>`` console scripts: the format comes from
    the first command line argument, the document from stdin, and options
    from the configuration file.

    Parameters
    ----------
    filter_name : str
        Registered filter name
    argv : sequence of str, optional
        Full command line including the program name, defaults to ``sys.argv``

    Returns
    -------
    int
        Process exit code

    """
    if argv is None:
        argv = sys.argv

    try:
        config = load_config_with_priority(None, os.environ.get(ENV_CONFIG_PATH))
        configure_logging(LogSettings.resolve(config))
        action = filter_registry.get_action(filter_name, **get_filter_options(config, filter_name))
    except (argparse.ArgumentTypeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    # Pandoc passes no format for some writers; fall back to the configured one
    if len(argv) < 2 and config.get("format"):
        argv = [argv[0] if argv else filter_name, str(config["format"])]

    try:
        to_json_filter(action, argv=argv)
    except MalformedDocumentError as e:
        logger.error(f"Malformed input document: {e.message}")
        return EXIT_INPUT_ERROR
    except PandocWalkError as e:
        logger.error(f"Filter '{filter_name}' failed: {e.message}")
        return EXIT_FILTER_ERROR
    except Exception as e:
        logger.error(
            f"Filter '{filter_name}' failed: {type(e).__name__}: {e}",
            exc_info=logger.isEnabledFor(logging.DEBUG),
        )
        return EXIT_FILTER_ERROR

    return EXIT_SUCCESS
