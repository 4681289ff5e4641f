"""
taghelper-tooltips: Readable tooltips for Razor tag helpers

Provides two interfaces:
1. CLI: `taghelper-tooltips describe entries.json`
2. Library: `import taghelper_tooltips; taghelper_tooltips.describe_elements([...])`

Editor integrations use taghelper_tooltips.completion directly.
"""

from typing import Optional

from lsprotocol import types as lsp

from .completion.capabilities import StaticCapabilityProvider
from .completion.formatter import TagHelperDescriptionFactory
from .completion.models import AttributeDescription, ElementDescription

try:
    from importlib.metadata import PackageNotFoundError, version
    __version__ = version("taghelper-tooltips")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "describe_elements",
    "describe_attributes",
]


def _factory(markdown: bool) -> TagHelperDescriptionFactory:
    formats = (lsp.MarkupKind.Markdown,) if markdown else (lsp.MarkupKind.PlainText,)
    return TagHelperDescriptionFactory(StaticCapabilityProvider(formats))


def describe_elements(entries: list[dict], markdown: bool = True) -> Optional[dict]:
    """Describe the tag helpers that apply to an element

    Args:
        entries: Dicts with "type_name" and optional "documentation"
        markdown: Render for a markdown-capable client (default True)

    Returns:
        dict with "text" and "kind" ("markdown" or "plaintext"),
        or None if entries is empty

    Example:
        >>> result = describe_elements([
        ...     {"type_name": "Microsoft.AspNetCore.SomeTagHelper",
        ...      "documentation": "<summary>Does things.</summary>"},
        ... ])
        >>> print(result["text"])
        **SomeTagHelper**
        <BLANKLINE>
        Does things.
    """
    result = _factory(markdown).try_create_description(ElementDescription.from_dicts(entries))
    return result.to_dict() if result else None


def describe_attributes(entries: list[dict], markdown: bool = True) -> Optional[dict]:
    """Describe the tag helper properties bound to an attribute

    Args:
        entries: Dicts with "display_name", "property_name",
            "return_type_name" and optional "documentation"
        markdown: Render for a markdown-capable client (default True)

    Returns:
        dict with "text" and "kind", or None if entries is empty

    Example:
        >>> result = describe_attributes([
        ...     {"display_name": "string Foo.SomeTagHelper.Name",
        ...      "property_name": "Name",
        ...      "return_type_name": "System.String"},
        ... ], markdown=False)
        >>> result["text"]
        'string SomeTagHelper.Name\\n\\n'
    """
    result = _factory(markdown).try_create_description(AttributeDescription.from_dicts(entries))
    return result.to_dict() if result else None
