"""Prefix symbols selecting which dimension a search string filters on."""

from types import MappingProxyType
from typing import Optional

from .models import SearchDimension

SYMBOL_TO_DIMENSION = MappingProxyType({
    "@": SearchDimension.AUTHOR,
    "~": SearchDimension.CHANGED_LINES,
    "=": SearchDimension.CHANGES,
    ":": SearchDimension.FILES,
    "#": SearchDimension.SHA,
})

DIMENSION_TO_SYMBOL = MappingProxyType({
    dimension: symbol for symbol, dimension in SYMBOL_TO_DIMENSION.items()
})


def symbol_to_dimension(symbol: str) -> Optional[SearchDimension]:
    return SYMBOL_TO_DIMENSION.get(symbol)


def dimension_to_symbol(dimension: Optional[SearchDimension]) -> Optional[str]:
    return DIMENSION_TO_SYMBOL.get(dimension)


def parse_prefix(text: str) -> Optional[tuple[SearchDimension, str]]:
    """Split a prefix-annotated search string into (dimension, value).

    The symbol may be followed by a single space, which is not part of the
    value. Returns None when the text does not start with a known symbol.
    """
    if not text:
        return None

    dimension = symbol_to_dimension(text[0])
    if dimension is None:
        return None

    value = text[2:] if text[1:2] == " " else text[1:]
    return dimension, value
