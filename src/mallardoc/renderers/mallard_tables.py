#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mallardoc/renderers/mallard_tables.py
"""Style lookup tables for the Mallard dialect.

Each table maps a node's declared style to the Mallard vocabulary used to
render it. Every table declares a default entry, and :func:`lookup` returns
that default for unknown or missing keys, so an unrecognized style is never an
error.

"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic, Iterator, Mapping, Optional, TypeVar

from mallardoc.constants import TableSection

T = TypeVar("T")


@dataclass(frozen=True)
class StyleTable(Generic[T]):
    """Immutable mapping from style keys to entries with a declared default.

    Parameters
    ----------
    name : str
        Table name, used in reprs and logs
    entries : Mapping[str, T]
        Known style keys
    default : T
        Entry returned for keys that are absent or None

    """

    name: str
    entries: Mapping[str, T]
    default: T

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def keys(self) -> tuple[str, ...]:
        """Return the known style keys."""
        return tuple(self.entries)


def lookup(table: StyleTable[T], key: Optional[str]) -> T:
    """Return the entry for ``key`` or the table's default.

    Examples
    --------
    >>> lookup(OLIST_STYLES, "loweralpha")
    'lower-alpha'
    >>> lookup(OLIST_STYLES, "circled")
    'numbered'

    """
    if key is None:
        return table.default
    return table.entries.get(key, table.default)


@dataclass(frozen=True)
class DlistTags:
    """Element names used to render one description-list style.

    A None ``list``, ``entry`` or ``label`` means that wrapper element is not emitted.
    """

    list: Optional[str]
    entry: Optional[str]
    term: str
    label: Optional[str] = None


@dataclass(frozen=True)
class QuoteTags:
    """Open and close markers placed around quoted text."""

    open: str = ""
    close: str = ""

    def __iter__(self) -> Iterator[str]:
        return iter((self.open, self.close))


_LABELED = DlistTags(list="terms", entry="item", term="title")

DLIST_TAGS: StyleTable[DlistTags] = StyleTable(
    name="dlist",
    entries={
        "labeled": _LABELED,
        "qanda": DlistTags(list="list", entry="item", term="p"),
        "glossary": DlistTags(list="terms", entry="item", term="title"),
        "horizontal": DlistTags(list="terms", entry="item", term="title"),
    },
    default=_LABELED,
)

OLIST_STYLES: StyleTable[str] = StyleTable(
    name="olist",
    entries={
        "arabic": "numbered",
        "loweralpha": "lower-alpha",
        "upperalpha": "upper-alpha",
        "lowerroman": "lower-roman",
        "upperroman": "upper-roman",
    },
    default="numbered",
)

QUOTE_TAGS: StyleTable[QuoteTags] = StyleTable(
    name="quote",
    entries={
        "emphasis": QuoteTags("<em>", "</em>"),
        "strong": QuoteTags('<em style="strong">', "</em>"),
        "monospaced": QuoteTags("<code>", "</code>"),
        "double": QuoteTags("&#8220;", "&#8221;"),
        "single": QuoteTags("&#8216;", "&#8217;"),
        "mark": QuoteTags('<em style="marked">', "</em>"),
    },
    default=QuoteTags(),
)

# Mallard note styles; unknown admonition kinds pass through unchanged.
ADMONITION_STYLES: StyleTable[Optional[str]] = StyleTable(
    name="admonition",
    entries={
        "note": "note",
        "tip": "tip",
        "important": "important",
        "warning": "warning",
        "caution": "caution",
    },
    default=None,
)

# Emission order of table sections; the foot precedes the body
TABLE_SECTIONS: tuple[TableSection, ...] = ("head", "foot", "body")

