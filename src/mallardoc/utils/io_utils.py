#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mallardoc/utils/io_utils.py
"""I/O utilities for reading serialized documents and writing rendered pages.

Rendering itself is in-memory; these helpers sit at the edges, used by
``BaseRenderer.render`` and the command-line driver.

"""

from __future__ import annotations

import io
import sys
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from mallardoc.exceptions import FileError, FileNotFoundError, OutputWriteError

STDIO_MARKER = "-"


def write_text(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or stream as UTF-8.

    Parameters
    ----------
    text : str
        Rendered markup
    output : str, Path, IO[bytes] or IO[str]
        Destination path, or a binary or text stream

    Raises
    ------
    OutputWriteError
        If the destination path cannot be written
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> from io import BytesIO
        >>> buffer = BytesIO()
        >>> write_text("<page/>", buffer)
        >>> buffer.getvalue()
        b'<page/>'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    # Detect binary vs text streams, concrete types first
    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        cast(IO[bytes], output).write(text.encode("utf-8"))
    else:
        cast(IO[str], output).write(text)


def read_text(source: Union[str, Path]) -> str:
    """Read a UTF-8 text file, or standard input when ``source`` is ``"-"``.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileError
        If the file cannot be read or decoded

    """
    if str(source) == STDIO_MARKER:
        return sys.stdin.read()

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(str(path))
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"Cannot read input file {path}: {e}", file_path=str(path), original_error=e) from e


__all__ = ["STDIO_MARKER", "read_text", "write_text"]
