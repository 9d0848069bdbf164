#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for rendering serialized document ASTs to Mallard.

The document parser runs upstream and hands over its AST as JSON (see
``mallardoc.ast.serialization``); this driver loads it, renders it and
writes the page.

Environment Variable Support
----------------------------
``MALLARDOC_CONFIG`` names a configuration file used when ``--config`` is
not given. CLI arguments always override configuration values.

Examples
--------
Render to standard output::

    $ mallardoc guide.json

Write a page file and verify it is well-formed::

    $ mallardoc guide.json -o guide.page --check

Produce embeddable body content in German::

    $ mallardoc guide.json --embedded --lang de

"""

import argparse
import logging
import os
import sys
from typing import Any, Dict, Optional

from mallardoc.ast.nodes import Document
from mallardoc.ast.serialization import json_to_ast
from mallardoc.cli.config import load_config_with_priority, options_from_config
from mallardoc.cli.output import print_diagnostics, should_use_rich_output
from mallardoc.exceptions import (
    DependencyError,
    FileError,
    MallardocError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mallardoc.logging_utils import configure_logging
from mallardoc.options.mallard import MallardRendererOptions
from mallardoc.renderers.mallard import MallardRenderer
from mallardoc.utils.io_utils import STDIO_MARKER, read_text, write_text
from mallardoc.utils.xml_check import check_well_formed

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

CONFIG_ENV_VAR = "MALLARDOC_CONFIG"


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (FileError, OutputWriteError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``mallardoc`` command."""
    parser = argparse.ArgumentParser(
        prog="mallardoc",
        description="Render a serialized document AST (JSON) to a Mallard page.",
    )
    parser.add_argument("input", help="Serialized document AST, or '-' to read standard input")
    parser.add_argument("-o", "--out", dest="out", help="Output file (default: standard output)")

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help=f"Configuration file (default: ${CONFIG_ENV_VAR} or auto-discovered)")
    config_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    render_group = parser.add_argument_group("rendering")
    render_group.add_argument(
        "--embedded",
        action="store_true",
        default=None,
        help="Emit only the body content instead of a complete page",
    )
    render_group.add_argument(
        "--no-xml-declaration",
        dest="xml_declaration",
        action="store_false",
        default=None,
        help="Omit the XML declaration from standalone output",
    )
    render_group.add_argument(
        "--no-checklist-markers",
        dest="checklist_markers",
        action="store_false",
        default=None,
        help="Do not prefix checklist items with check or cross glyphs",
    )
    render_group.add_argument("--lang", dest="default_lang", help="Page language when the document does not set one")
    render_group.add_argument(
        "--check",
        action="store_true",
        help="Fail unless the rendered markup is well-formed XML",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument("--rich", action="store_true", help="Use rich formatting for diagnostics")
    output_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    output_group.add_argument("--log-file", help="Write log messages to this file as well")
    output_group.add_argument("--trace", action="store_true", help="Verbose logging with timestamps and logger names")

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    if parsed_args.trace:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    # Diagnostics are printed by render_file
    configure_logging(
        log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace, console_diagnostics=False
    )


def _cli_overrides(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if parsed_args.embedded:
        overrides["standalone"] = False
    if parsed_args.xml_declaration is not None:
        overrides["xml_declaration"] = parsed_args.xml_declaration
    if parsed_args.checklist_markers is not None:
        overrides["checklist_markers"] = parsed_args.checklist_markers
    if parsed_args.default_lang:
        overrides["default_lang"] = parsed_args.default_lang
    return overrides


def setup_options(parsed_args: argparse.Namespace) -> MallardRendererOptions:
    """Build renderer options from configuration files and CLI flags.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration cannot be loaded or holds invalid values

    """
    config: Dict[str, Any] = {}
    if not parsed_args.no_config:
        config = load_config_with_priority(explicit_path=parsed_args.config, env_var_path=os.environ.get(CONFIG_ENV_VAR))

    options = options_from_config(config)
    overrides = _cli_overrides(parsed_args)
    if overrides:
        try:
            options = options.create_updated(**overrides)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
    return options


def _load_document(source: str) -> Document:
    document = json_to_ast(read_text(source))
    if not isinstance(document, Document):
        raise ParsingError(
            f"Expected a Document at the root of {source}, got {type(document).__name__}", parsing_stage="ast"
        )
    return document


def render_file(parsed_args: argparse.Namespace, options: MallardRendererOptions) -> int:
    """Load, render and write one document; returns the exit code."""
    use_rich = should_use_rich_output(parsed_args, raise_on_missing=True)

    document = _load_document(parsed_args.input)
    result = MallardRenderer(options).render_to_result(document)
    print_diagnostics(result.diagnostics, use_rich)

    if parsed_args.check:
        check_well_formed(result.content)

    if parsed_args.out and parsed_args.out != STDIO_MARKER:
        write_text(result.content, parsed_args.out)
        logger.info("Wrote %s", parsed_args.out)
    else:
        sys.stdout.write(result.content)
        sys.stdout.write("\n")

    return EXIT_SUCCESS


def main(args: Optional[list[str]] = None) -> int:
    """Execute the main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = setup_options(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        return render_file(parsed_args, options)
    except MallardocError as e:
        logger.debug("Rendering failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())
