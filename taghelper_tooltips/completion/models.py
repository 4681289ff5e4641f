"""Tag helper description data model."""

from __future__ import annotations

from dataclasses import dataclass

from lsprotocol import types as lsp


@dataclass(frozen=True)
class TagHelperDescriptionInfo:
    """Documentation for one tag helper associated with an element."""

    type_name: str  # fully qualified, e.g. "Microsoft.AspNetCore.SomeTagHelper"
    documentation: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> TagHelperDescriptionInfo:
        return cls(
            type_name=data["type_name"],
            documentation=data.get("documentation"),
        )


@dataclass(frozen=True)
class AttributeDescriptionInfo:
    """Documentation for one tag helper property bound to an attribute."""

    display_name: str  # "<ReturnType> <OwnerType>.<PropertyName>"
    property_name: str
    return_type_name: str
    documentation: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> AttributeDescriptionInfo:
        return cls(
            display_name=data["display_name"],
            property_name=data["property_name"],
            return_type_name=data["return_type_name"],
            documentation=data.get("documentation"),
        )


@dataclass(frozen=True)
class ElementDescription:
    """All tag helpers contributing to a completed or hovered element."""

    associated_tag_helpers: tuple[TagHelperDescriptionInfo, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "associated_tag_helpers", tuple(self.associated_tag_helpers))

    @classmethod
    def from_dicts(cls, entries: list[dict]) -> ElementDescription:
        return cls(tuple(TagHelperDescriptionInfo.from_dict(e) for e in entries))


@dataclass(frozen=True)
class AttributeDescription:
    """All tag helper properties bound to a completed or hovered attribute."""

    associated_attributes: tuple[AttributeDescriptionInfo, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "associated_attributes", tuple(self.associated_attributes))

    @classmethod
    def from_dicts(cls, entries: list[dict]) -> AttributeDescription:
        return cls(tuple(AttributeDescriptionInfo.from_dict(e) for e in entries))


@dataclass(frozen=True)
class FormattedDescription:
    """Rendered tooltip text and the format it was rendered in."""

    text: str
    is_markup: bool

    @property
    def kind(self) -> lsp.MarkupKind:
        return lsp.MarkupKind.Markdown if self.is_markup else lsp.MarkupKind.PlainText

    def to_markup_content(self) -> lsp.MarkupContent:
        """Wrap the text for a hover or completion item response."""
        return lsp.MarkupContent(kind=self.kind, value=self.text)

    def to_dict(self) -> dict:
        return {"text": self.text, "kind": self.kind.value}
