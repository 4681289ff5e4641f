"""Reduction of fully qualified type and member names to display forms."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Opening delimiter -> matching closing delimiter. Crefs write generics as
# List{T} where source code writes List<T>.
_PAIRS = {'<': '>', '{': '}', '(': ')'}
_CLOSERS = frozenset(_PAIRS.values())

_PRIMITIVE_NAMES = {
    "System.Boolean": "bool",
    "System.Byte": "byte",
    "System.SByte": "sbyte",
    "System.Char": "char",
    "System.Decimal": "decimal",
    "System.Double": "double",
    "System.Single": "float",
    "System.Int16": "short",
    "System.UInt16": "ushort",
    "System.Int32": "int",
    "System.UInt32": "uint",
    "System.Int64": "long",
    "System.UInt64": "ulong",
    "System.Object": "object",
    "System.String": "string",
    "System.Void": "void",
}


def _reduce(content: str, skip_dots: int) -> str:
    """Return the text after the top-level dot number ``skip_dots`` (from the end).

    Scans right to left once. Dots nested inside ``<>``, ``{}`` or ``()``
    are ignored. Unbalanced or mismatched delimiters, or a trailing dot,
    leave ``content`` untouched.
    """
    pending: list[str] = []  # closers still waiting for their opener
    cut = -1
    dots_seen = 0

    for i in range(len(content) - 1, -1, -1):
        ch = content[i]
        if ch in _CLOSERS:
            pending.append(ch)
        elif ch in _PAIRS:
            if not pending or pending.pop() != _PAIRS[ch]:
                logger.debug("Unbalanced delimiters in %r", content)
                return content
        elif ch == '.' and not pending and cut < 0:
            if dots_seen == skip_dots:
                cut = i
            dots_seen += 1

    if pending:
        logger.debug("Unbalanced delimiters in %r", content)
        return content
    if cut < 0 or content.endswith('.'):
        return content
    return content[cut + 1:]


def reduce_type_name(content: str) -> str:
    """Reduce a fully qualified type name to its last segment.

    Generic arguments are kept as written:

        >>> reduce_type_name("System.Collections.Generic.List<System.String>")
        'List<System.String>'
    """
    return _reduce(content, skip_dots=0)


def reduce_member_name(content: str) -> str:
    """Reduce a fully qualified member name to ``Owner.Member``.

    Generic arguments and method parameter lists stay attached:

        >>> reduce_member_name("Foo.Bar.Baz<Qux.A>.Run(System.String)")
        'Baz<Qux.A>.Run(System.String)'
    """
    return _reduce(content, skip_dots=1)


def get_simple_name(type_name: str) -> str:
    """Map a primitive's full name (e.g. ``System.Int32``) to its keyword alias."""
    return _PRIMITIVE_NAMES.get(type_name, type_name)
