"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mallardoc/cli/output.py
import argparse
import sys
from typing import IO, Iterable, Optional

from mallardoc.diagnostics import Diagnostic
from mallardoc.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(args: argparse.Namespace, raise_on_missing: bool = False) -> bool:
    """Determine if Rich output should be used for diagnostics.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed

    Returns
    -------
    bool
        True when ``--rich`` was given and Rich is importable

    """
    if not getattr(args, "rich", False):
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                feature_name="rich-output",
                missing_packages=[("rich", "")],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install mallardoc[rich]",
            )
        return False

    return True


def print_diagnostics(diagnostics: Iterable[Diagnostic], use_rich: bool, stream: Optional[IO[str]] = None) -> int:
    """Print render diagnostics, one per line.

    Parameters
    ----------
    diagnostics : iterable of Diagnostic
        Diagnostics reported by the renderer
    use_rich : bool
        Colour the output with Rich
    stream : IO[str], optional
        Destination, defaults to stderr

    Returns
    -------
    int
        Number of diagnostics printed

    """
    target = stream or sys.stderr
    items = list(diagnostics)

    if use_rich and items:
        from rich.console import Console
        from rich.markup import escape

        console = Console(file=target, highlight=False)
        for diagnostic in items:
            colour = "red" if diagnostic.severity == "error" else "yellow"
            location = f" [dim]({escape(diagnostic.node_id)})[/dim]" if diagnostic.node_id else ""
            console.print(
                f"[{colour}]{diagnostic.severity}[/{colour}] [bold]{diagnostic.code}[/bold]: "
                f"{escape(diagnostic.message)}{location}"
            )
        return len(items)

    for diagnostic in items:
        print(f"{diagnostic.code}: {diagnostic}", file=target)
    return len(items)
