"""Negotiated client documentation formats."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer

logger = logging.getLogger(__name__)

# Attribute paths into lsprotocol's ClientCapabilities, per request kind.
_FORMAT_PATHS = {
    "completion": ("text_document", "completion", "completion_item", "documentation_format"),
    "hover": ("text_document", "hover", "content_format"),
}


@dataclass(frozen=True)
class ClientCapability:
    """Snapshot of the documentation formats a client accepts, in preference order."""

    documentation_formats: tuple[lsp.MarkupKind, ...] = ()

    @property
    def supports_markup(self) -> bool:
        return lsp.MarkupKind.Markdown in self.documentation_formats

    @classmethod
    def plain_text(cls) -> ClientCapability:
        return cls((lsp.MarkupKind.PlainText,))


@runtime_checkable
class CapabilityProvider(Protocol):
    """Interface for capability lookup (allows DI for testing)."""

    def capability(self) -> ClientCapability: ...


class StaticCapabilityProvider:
    """Provider with a fixed list of formats."""

    def __init__(self, formats=(lsp.MarkupKind.PlainText,)):
        self._capability = ClientCapability(tuple(formats))

    def capability(self) -> ClientCapability:
        return self._capability


class LanguageServerCapabilityProvider:
    """Production provider: reads what the client sent in ``initialize``.

    The server is only consulted when a capability is requested, so the
    provider can be built before the client has connected.
    """

    def __init__(self, server: LanguageServer, feature: str = "completion"):
        if feature not in _FORMAT_PATHS:
            raise ValueError(f"Unknown feature {feature!r}, expected one of {sorted(_FORMAT_PATHS)}")
        self.server = server
        self.feature = feature

    def capability(self) -> ClientCapability:
        node = getattr(self.server, "client_capabilities", None)
        for attr in _FORMAT_PATHS[self.feature]:
            if node is None:
                break
            node = getattr(node, attr, None)

        if not node:
            logger.debug("Client sent no %s documentation formats, using plain text", self.feature)
            return ClientCapability.plain_text()
        return ClientCapability(tuple(node))
