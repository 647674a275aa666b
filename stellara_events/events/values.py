"""
Stellara Events - Typed Values

Every position in an event's ``data`` sequence and every element of a
metadata value list is one of four typed values:

    bool      -- flags (``is_buy``, ``authorized``, ``success``)
    int       -- amounts, ids, periods; i128 / u128 range
    Symbol    -- interned short text (pairs, vote types, reasons, titles)
    Address   -- an account or contract identity

``Symbol`` and ``Address`` are thin ``str`` subclasses so they compare and
hash like text while keeping their type through the wire codec.  Free text
only becomes a ``Symbol`` through ``intern_symbol``, which enforces the
symbol alphabet and length limit.
"""
from __future__ import annotations

import re
from typing import Any, Union

from stellara_events.events.errors import EncodingError

# Symbol alphabet of the host's interned symbols.
_SYMBOL_RE = re.compile(r"[A-Za-z0-9_]+")

# Integers cover signed i128 amounts and unsigned u128 voting power.
INT_MIN: int = -(2**127)
INT_MAX: int = 2**128 - 1


class Address(str):
    """Identity of an account or contract.

    Address validation (checksums, strkey format) belongs to the host; here
    an address is any non-empty string.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Address({str.__repr__(self)})"


class Symbol(str):
    """Interned short text.  Build with ``intern_symbol``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


TypedValue = Union[bool, int, Symbol, Address]


def intern_symbol(text: str, max_length: int | None = None) -> Symbol:
    """Intern ``text`` as a ``Symbol``.

    Args:
        text: Free text to intern.
        max_length: Length limit.  Defaults to the configured
            ``symbol_max_length`` setting.

    Raises:
        EncodingError: If ``text`` is empty, too long, or contains
            characters outside ``[A-Za-z0-9_]``.
    """
    if isinstance(text, Symbol):
        return text
    if not isinstance(text, str):
        raise EncodingError(f"Cannot intern non-text value {text!r}")
    if max_length is None:
        from stellara_events.config.settings import get_settings

        max_length = get_settings().symbol_max_length
    if not text:
        raise EncodingError("Cannot intern an empty symbol")
    if len(text) > max_length:
        raise EncodingError(
            f"Symbol {text[:16]!r}... is {len(text)} chars, limit is {max_length}"
        )
    if not _SYMBOL_RE.fullmatch(text):
        raise EncodingError(
            f"Symbol {text!r} contains characters outside [A-Za-z0-9_]"
        )
    return Symbol(text)


def as_address(value: Any) -> Address:
    """Coerce ``value`` to an ``Address``.

    Raises:
        EncodingError: If ``value`` is not a non-empty string.
    """
    if isinstance(value, Address):
        return value
    if isinstance(value, str) and value and not isinstance(value, Symbol):
        return Address(value)
    raise EncodingError(f"Not a valid address: {value!r}")


def check_int(value: int) -> int:
    """Ensure ``value`` is an integer in the 128-bit wire range.

    ``bool`` and numeric text are rejected rather than coerced.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(
            f"Expected an integer, got {type(value).__name__}: {value!r}"
        )
    if not INT_MIN <= value <= INT_MAX:
        raise EncodingError(f"Integer {value} is outside the 128-bit range")
    return value


def check_bool(value: bool) -> bool:
    """Ensure ``value`` is a real ``bool`` (``1`` / ``"true"`` are rejected)."""
    if not isinstance(value, bool):
        raise EncodingError(
            f"Expected a bool, got {type(value).__name__}: {value!r}"
        )
    return value


def to_typed_value(value: Any) -> TypedValue:
    """Validate ``value`` as a typed value, interning plain text.

    ``bool`` is checked before ``int`` because ``bool`` subclasses ``int``.
    Plain ``str`` values are interned as symbols; identities must already be
    ``Address`` instances.

    Raises:
        EncodingError: If the value cannot be represented.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return check_int(value)
    if isinstance(value, (Address, Symbol)):
        return value
    if isinstance(value, str):
        return intern_symbol(value)
    raise EncodingError(
        f"Unsupported value type {type(value).__name__}: {value!r}"
    )
