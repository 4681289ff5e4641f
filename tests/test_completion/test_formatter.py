"""Tests for taghelper_tooltips.completion.formatter."""

import pytest
from lsprotocol import types as lsp

from taghelper_tooltips.completion.capabilities import StaticCapabilityProvider
from taghelper_tooltips.completion.formatter import (
    TagHelperDescriptionFactory,
    resolve_tag_helper_type_name,
)
from taghelper_tooltips.completion.models import (
    AttributeDescription,
    AttributeDescriptionInfo,
    ElementDescription,
    TagHelperDescriptionInfo,
)

USES_LIST = '<summary>Uses <see cref="T:System.Collections.List{System.String}" />s</summary>'


@pytest.fixture
def markdown_factory():
    return TagHelperDescriptionFactory(StaticCapabilityProvider([lsp.MarkupKind.Markdown]))


@pytest.fixture
def plain_text_factory():
    return TagHelperDescriptionFactory(StaticCapabilityProvider([lsp.MarkupKind.PlainText]))


def _some_property(documentation=USES_LIST):
    return AttributeDescriptionInfo(
        display_name="string Microsoft.AspNetCore.SomeTagHelpers.SomeTypeName.SomeProperty",
        property_name="SomeProperty",
        return_type_name="System.String",
        documentation=documentation,
    )


class TestResolveTagHelperTypeName:
    def test_simple_return_type(self):
        info = AttributeDescriptionInfo(
            display_name="string SomeTypeName.SomePropertyName",
            property_name="SomePropertyName",
            return_type_name="System.String",
            documentation="",
        )
        assert resolve_tag_helper_type_name(info) == "SomeTypeName"

    def test_complex_return_type(self):
        info = AttributeDescriptionInfo(
            display_name="SomeReturnTypeName SomeTypeName.SomePropertyName",
            property_name="SomePropertyName",
            return_type_name="SomeReturnTypeName",
            documentation="",
        )
        assert resolve_tag_helper_type_name(info) == "SomeTypeName"

    def test_keeps_namespace(self):
        assert resolve_tag_helper_type_name(_some_property()) == "Microsoft.AspNetCore.SomeTagHelpers.SomeTypeName"

    def test_generic_return_type_with_spaces(self):
        info = AttributeDescriptionInfo(
            display_name=(
                "System.Collections.Generic.IDictionary<System.String, System.String> "
                "Microsoft.AspNetCore.Mvc.TagHelpers.AnchorTagHelper.RouteValues"
            ),
            property_name="RouteValues",
            return_type_name="System.Collections.Generic.IDictionary<System.String, System.String>",
            documentation="",
        )
        assert resolve_tag_helper_type_name(info) == "Microsoft.AspNetCore.Mvc.TagHelpers.AnchorTagHelper"


class TestTryCreateDescription:
    def test_no_tag_helpers(self, markdown_factory):
        assert markdown_factory.try_create_description(ElementDescription()) is None

    def test_no_attributes(self, markdown_factory):
        assert markdown_factory.try_create_description(AttributeDescription()) is None

    def test_element_single(self, markdown_factory):
        description = ElementDescription([
            TagHelperDescriptionInfo("Microsoft.AspNetCore.SomeTagHelper", USES_LIST),
        ])
        result = markdown_factory.try_create_description(description)
        assert result.text == "**SomeTagHelper**\n\nUses `List<System.String>`s"
        assert result.is_markup
        assert result.kind == lsp.MarkupKind.Markdown

    def test_element_plain_text_no_bold(self, plain_text_factory):
        description = ElementDescription([
            TagHelperDescriptionInfo("Microsoft.AspNetCore.SomeTagHelper", USES_LIST),
        ])
        result = plain_text_factory.try_create_description(description)
        assert result.text == "SomeTagHelper\n\nUses `List<System.String>`s"
        assert not result.is_markup
        assert result.kind == lsp.MarkupKind.PlainText

    def test_element_both_formats_is_bold(self):
        factory = TagHelperDescriptionFactory(
            StaticCapabilityProvider([lsp.MarkupKind.PlainText, lsp.MarkupKind.Markdown])
        )
        description = ElementDescription([
            TagHelperDescriptionInfo("Microsoft.AspNetCore.SomeTagHelper", USES_LIST),
        ])
        result = factory.try_create_description(description)
        assert result.text == "**SomeTagHelper**\n\nUses `List<System.String>`s"
        assert result.is_markup

    def test_element_missing_capability_is_plain_text(self):
        factory = TagHelperDescriptionFactory(StaticCapabilityProvider([]))
        description = ElementDescription([TagHelperDescriptionInfo("Foo.Bar.Baz", USES_LIST)])
        result = factory.try_create_description(description)
        assert result.text == "Baz\n\nUses `List<System.String>`s"
        assert not result.is_markup

    def test_default_provider_is_plain_text(self):
        description = ElementDescription([TagHelperDescriptionInfo("Foo.Bar.Baz", "Docs.")])
        result = TagHelperDescriptionFactory().try_create_description(description)
        assert result.text == "Baz\n\nDocs."

    def test_element_multiple(self, markdown_factory):
        description = ElementDescription([
            TagHelperDescriptionInfo(
                "Microsoft.AspNetCore.SomeTagHelper",
                '<summary>\nUses <see cref="T:System.Collections.List{System.String}" />s\n</summary>',
            ),
            TagHelperDescriptionInfo(
                "Microsoft.AspNetCore.OtherTagHelper",
                '<summary>\nAlso uses <see cref="T:System.Collections.List{System.String}" />s\n\r\n\r\r</summary>',
            ),
        ])
        result = markdown_factory.try_create_description(description)
        assert result.text == (
            "**SomeTagHelper**\n\nUses `List<System.String>`s\n"
            "---\n"
            "**OtherTagHelper**\n\nAlso uses `List<System.String>`s"
        )
        assert result.text.count("---") == 1

    def test_element_without_summary_keeps_header(self, markdown_factory):
        description = ElementDescription([
            TagHelperDescriptionInfo("Foo.SomeTagHelper", "<param name=\"x\">value</param>"),
            TagHelperDescriptionInfo("Foo.OtherTagHelper", None),
        ])
        result = markdown_factory.try_create_description(description)
        assert result.text == "**SomeTagHelper**\n\n\n---\n**OtherTagHelper**\n\n"

    def test_attribute_single(self, markdown_factory):
        result = markdown_factory.try_create_description(AttributeDescription([_some_property()]))
        assert result.text == "**string** SomeTypeName.**SomeProperty**\n\nUses `List<System.String>`s"
        assert result.is_markup

    def test_attribute_plain_text_no_bold(self, plain_text_factory):
        result = plain_text_factory.try_create_description(AttributeDescription([_some_property()]))
        assert result.text == "string SomeTypeName.SomeProperty\n\nUses `List<System.String>`s"
        assert not result.is_markup

    def test_attribute_generic_return_type(self, markdown_factory):
        description = AttributeDescription([
            AttributeDescriptionInfo(
                display_name=(
                    "System.Collections.Generic.IDictionary<System.String, System.String> "
                    "Microsoft.AspNetCore.Mvc.TagHelpers.AnchorTagHelper.RouteValues"
                ),
                property_name="RouteValues",
                return_type_name="System.Collections.Generic.IDictionary<System.String, System.String>",
                documentation="<summary>Route values.</summary>",
            ),
        ])
        result = markdown_factory.try_create_description(description)
        assert result.text == (
            "**IDictionary<System.String, System.String>** AnchorTagHelper.**RouteValues**\n\nRoute values."
        )

    def test_attribute_multiple(self, markdown_factory):
        description = AttributeDescription([
            _some_property(),
            AttributeDescriptionInfo(
                display_name="System.Boolean? Microsoft.AspNetCore.SomeTagHelpers.AnotherTypeName.AnotherProperty",
                property_name="AnotherProperty",
                return_type_name="System.Boolean?",
                documentation='<summary>\nUses <see cref="T:System.Collections.List{System.String}" />s\n</summary>',
            ),
        ])
        result = markdown_factory.try_create_description(description)
        assert result.text == (
            "**string** SomeTypeName.**SomeProperty**\n\nUses `List<System.String>`s\n"
            "---\n"
            "**Boolean?** AnotherTypeName.**AnotherProperty**\n\nUses `List<System.String>`s"
        )

    def test_reads_capability_per_call(self):
        provider = StaticCapabilityProvider([lsp.MarkupKind.PlainText])
        factory = TagHelperDescriptionFactory(provider)
        description = ElementDescription([TagHelperDescriptionInfo("Foo.Bar.Baz", "Docs.")])
        assert factory.try_create_description(description).text.startswith("Baz")

        factory.capability_provider = StaticCapabilityProvider([lsp.MarkupKind.Markdown])
        assert factory.try_create_description(description).text.startswith("**Baz**")

    def test_markup_content(self, markdown_factory):
        description = ElementDescription([TagHelperDescriptionInfo("Foo.Bar.Baz", "Docs.")])
        content = markdown_factory.try_create_description(description).to_markup_content()
        assert isinstance(content, lsp.MarkupContent)
        assert content.kind == lsp.MarkupKind.Markdown
        assert content.value == "**Baz**\n\nDocs."
