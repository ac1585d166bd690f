"""Constant name ↔ file path inflections.

Source file paths map to constant names by convention:
    sales/order_item.rb  ⟷  Sales::OrderItem
"""

import re

from packcheck.domain.model.constant import ROOT_NAMESPACE

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def camelize(path: str) -> str:
    """Convert a slash-separated path to a constant name.

    Example:
        >>> camelize("sales/order_item")
        'Sales::OrderItem'
    """
    return "::".join(
        "".join(word[:1].upper() + word[1:] for word in segment.split("_"))
        for segment in path.split("/")
    )


def underscore(name: str) -> str:
    """Convert a constant name to its conventional path (no extension).

    The leading root namespace marker is ignored.

    Example:
        >>> underscore("::Sales::HTTPClient")
        'sales/http_client'
    """
    word = name.removeprefix(ROOT_NAMESPACE).replace("::", "/")
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    return word.replace("-", "_").lower()
