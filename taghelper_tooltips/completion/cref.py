"""Documentation cross-reference (cref) resolution."""

from __future__ import annotations

import logging

from .names import reduce_member_name, reduce_type_name

logger = logging.getLogger(__name__)

_TYPE_KIND = 'T'
_MEMBER_KINDS = frozenset('PFM')  # property, field, method


def resolve_cref(token: str) -> str:
    """Resolve a cref token such as ``T:Foo.Bar`` to a display name.

    Returns an empty string for anything that is not ``<kind>:<name>`` with a
    known kind letter and a non-empty name.
    """
    if not isinstance(token, str) or len(token) < 3 or token[1] != ':':
        logger.debug("Unresolvable cref %r", token)
        return ""

    kind, name = token[0], token[2:]
    if kind == _TYPE_KIND:
        return reduce_type_name(name)
    if kind in _MEMBER_KINDS:
        return reduce_member_name(name)

    logger.debug("Unknown cref kind %r in %r", kind, token)
    return ""


def to_display_generics(name: str) -> str:
    """Rewrite cref-style generics (``List{T}``) the way source code spells them."""
    return name.replace('{', '<').replace('}', '>')
