"""
Reader for delimiter-separated two-column resource files.

Stem tables use ';' and cluster tables use a tab. Files carry no header
row; quoting follows the usual CSV conventions so a quoted column may
contain the delimiter.
"""

from __future__ import annotations

import csv
from typing import BinaryIO, Iterator, Optional, Tuple

from .errors import ParseError, ResourceIOError

SEMICOLON = ";"
TAB = "\t"


def iter_records(
    stream: BinaryIO,
    delimiter: str,
    *,
    source: Optional[str] = None,
) -> Iterator[Tuple[str, str]]:
    """
    Lazily decode two-column records from a UTF-8 byte stream.

    Args:
        stream: Binary stream to read from
        delimiter: Single column separator character (e.g. ';' or '\\t')
        source: Resource key, used in error messages

    Yields:
        (left, right) tuples, one per non-empty row

    Raises:
        ValueError: If the delimiter is not a single character
        ParseError: If a row does not have exactly two columns or the bytes are not UTF-8
        ResourceIOError: If the stream cannot be read
    """
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")

    text = _decode_lines(stream, source)
    reader = csv.reader(text, delimiter=delimiter, quotechar='"', strict=True)
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise ParseError(str(exc), source=source, line=reader.line_num) from exc

        if not row:
            continue
        if len(row) != 2:
            raise ParseError(
                f"expected 2 columns, found {len(row)}",
                source=source,
                line=reader.line_num,
            )
        yield row[0], row[1]


def _decode_lines(stream: BinaryIO, source: Optional[str]) -> Iterator[str]:
    line_num = 0
    try:
        for line_num, raw in enumerate(stream, 1):
            try:
                yield raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ParseError(f"invalid UTF-8 data ({exc.reason})", source=source, line=line_num) from exc
    except OSError as exc:
        raise ResourceIOError(f"read failed after line {line_num}: {exc}", source=source) from exc
