"""Tooltip text for tag helper elements and attributes."""

from __future__ import annotations

import logging

from .capabilities import CapabilityProvider, StaticCapabilityProvider
from .models import (
    AttributeDescription,
    AttributeDescriptionInfo,
    ElementDescription,
    FormattedDescription,
    TagHelperDescriptionInfo,
)
from .names import get_simple_name, reduce_type_name
from .summary import clean_summary_content, try_extract_summary

logger = logging.getLogger(__name__)

_SEPARATOR = "\n---\n"


def resolve_tag_helper_type_name(info: AttributeDescriptionInfo) -> str:
    """Owner type of an attribute, taken from its display name.

    ``"string Foo.Bar.SomeProperty"`` gives ``"Foo.Bar"``.
    """
    end = len(info.display_name) - len(info.property_name) - 1
    # Generic return types may contain spaces; the owner type never does.
    start = info.display_name.rindex(' ', 0, end) + 1
    return info.display_name[start:end]


def _summary_text(documentation: str | None) -> str:
    summary = try_extract_summary(documentation)
    if summary is None:
        return ""
    return clean_summary_content(summary)


def _element_header(info: TagHelperDescriptionInfo, is_markup: bool) -> str:
    name = reduce_type_name(info.type_name)
    return f"**{name}**" if is_markup else name


def _attribute_header(info: AttributeDescriptionInfo, is_markup: bool) -> str:
    return_type = reduce_type_name(get_simple_name(info.return_type_name))
    owner = reduce_type_name(resolve_tag_helper_type_name(info))
    if is_markup:
        return f"**{return_type}** {owner}.**{info.property_name}**"
    return f"{return_type} {owner}.{info.property_name}"


class TagHelperDescriptionFactory:
    """Builds completion and hover descriptions for tag helpers."""

    def __init__(self, capability_provider: CapabilityProvider | None = None):
        self.capability_provider = capability_provider or StaticCapabilityProvider()

    def try_create_description(
        self, description: ElementDescription | AttributeDescription
    ) -> FormattedDescription | None:
        """Render every associated entry, separated by ``---`` lines.

        Returns:
            The formatted description, or None when there is nothing to describe.
        """
        if isinstance(description, AttributeDescription):
            entries = description.associated_attributes
            header = _attribute_header
        else:
            entries = description.associated_tag_helpers
            header = _element_header

        if not entries:
            logger.debug("No associated tag helper descriptions")
            return None

        is_markup = self.capability_provider.capability().supports_markup

        blocks = []
        for info in entries:
            blocks.append(f"{header(info, is_markup)}\n\n{_summary_text(info.documentation)}")

        return FormattedDescription(text=_SEPARATOR.join(blocks), is_markup=is_markup)
