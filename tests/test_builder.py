"""
Tests for the token matrix builder and path assembly.

Tests cover:
- Nested path assembly
- Language / Type / Tone layer shapes and metadata
- Token key grammar
- Reference key injection
"""

import re

import pytest

from chuk_mcp_copy.constants import LANGUAGE_FILE, TONES, TYPES
from chuk_mcp_copy.core import count_tokens, flatten_tokens, get_nested, set_nested
from chuk_mcp_copy.errors import UnknownToneError, UnknownTypeError
from chuk_mcp_copy.models import ContentMatrix
from chuk_mcp_copy.tokens import TokenMatrixBuilder, random_reference_key


class TestSetNested:
    """Tests for the nested-path assembler."""

    def test_single_segment_domain(self) -> None:
        assert set_nested("nav", "dashboard", {"x": 1}) == {"nav": {"dashboard": {"x": 1}}}

    def test_multi_segment_domain(self) -> None:
        result = set_nested("legal.copyright", "notice", "v")
        assert result == {"legal": {"copyright": {"notice": "v"}}}

    def test_segments_are_opaque(self) -> None:
        """No validation of segment characters."""
        result = set_nested("a b.C-d", "Name!", 1)
        assert result == {"a b": {"C-d": {"Name!": 1}}}


class TestLanguageLayer:
    """Tests for Language layer tokens."""

    def test_token_count(self, builder: TokenMatrixBuilder, content: ContentMatrix) -> None:
        tree = builder.build_language_tokens("nav", "dashboard", content)
        assert count_tokens(tree) == 36

    def test_grouped_by_tone(self, builder: TokenMatrixBuilder, content: ContentMatrix) -> None:
        tree = builder.build_language_tokens("nav", "dashboard", content)
        group = tree["nav"]["dashboard"]
        assert list(group) == [t.full for t in TONES]
        for tone in TONES:
            assert len(group[tone.full]) == 6

    def test_keys_and_values(self, builder: TokenMatrixBuilder, content: ContentMatrix) -> None:
        tree = builder.build_language_tokens("nav", "dashboard", content)
        token = tree["nav"]["dashboard"]["witty"]["lang--witt--capt--dashboard"]
        assert token["$type"] == "text"
        assert token["$value"] == "Dashboard witty caption"

    def test_value_is_literal_text(self, builder: TokenMatrixBuilder, content_dict: dict) -> None:
        content_dict["neutral"]["title"] = "  Dashboard  "
        content = ContentMatrix.model_validate(content_dict)
        tree = builder.build_language_tokens("nav", "dashboard", content)
        token = tree["nav"]["dashboard"]["neutral"]["lang--neut--title--dashboard"]
        assert token["$value"] == "  Dashboard  "

    def test_every_cell_present(self, builder: TokenMatrixBuilder, content: ContentMatrix) -> None:
        tree = builder.build_language_tokens("nav", "dashboard", content)
        values = set(flatten_tokens(tree).values())
        assert values == {text for _, _, text in content.cells()}

    def test_metadata(self, builder: TokenMatrixBuilder, content: ContentMatrix) -> None:
        tree = builder.build_language_tokens("legal.copyright", "copyright", content)
        token = tree["legal"]["copyright"]["copyright"]["neutral"]["lang--neut--title--copyright"]
        figma = token["$extensions"]["figma"]
        assert figma["scopes"] == []
        assert figma["hiddenFromPublishing"] is True
        assert "referenceKey" not in figma
        assert figma["codeSyntax"] == {
            "WEB": "var(--legal-copyright-copyright-neutral-lang--neut--title--copyright)",
            "ANDROID": "legal_copyright_copyright_neutral_lang__neut__title__copyright",
            "iOS": "legalCopyrightCopyrightNeutralLangNeutTitleCopyright",
        }

    def test_key_order(self, builder: TokenMatrixBuilder, content: ContentMatrix) -> None:
        """Tokens serialize with a stable key order."""
        tree = builder.build_language_tokens("nav", "dashboard", content)
        token = tree["nav"]["dashboard"]["neutral"]["lang--neut--title--dashboard"]
        assert list(token) == ["$type", "$value", "$extensions"]
        assert list(token["$extensions"]["figma"]) == [
            "scopes",
            "codeSyntax",
            "hiddenFromPublishing",
        ]


class TestTypeLayer:
    """Tests for Type layer tokens."""

    def test_token_count(self, builder: TokenMatrixBuilder) -> None:
        tree = builder.build_type_tokens("nav", "dashboard", "title")
        assert count_tokens(tree) == 6

    def test_references_language_layer(self, builder: TokenMatrixBuilder) -> None:
        tree = builder.build_type_tokens("nav", "dashboard", "subt")
        tokens = tree["nav"]["dashboard"]
        assert list(tokens) == [f"type--{t.abbr}--dashboard" for t in TONES]
        assert (
            tokens["type--play--dashboard"]["$value"]
            == "{nav.dashboard.playful.lang--play--subt--dashboard}"
        )

    def test_metadata(self, builder: TokenMatrixBuilder) -> None:
        tree = builder.build_type_tokens("nav", "dashboard", "emoji")
        figma = tree["nav"]["dashboard"]["type--neut--dashboard"]["$extensions"]["figma"]
        assert figma["scopes"] == []
        assert figma["hiddenFromPublishing"] is True
        assert figma["referenceKey"] == "ref-0000"
        assert figma["codeSyntax"]["WEB"] == "var(--nav-dashboard-type--neut--dashboard)"

    def test_reference_keys_are_fresh(self, builder: TokenMatrixBuilder) -> None:
        tree = builder.build_type_tokens("nav", "dashboard", "title")
        keys = [
            token["$extensions"]["figma"]["referenceKey"]
            for token in tree["nav"]["dashboard"].values()
        ]
        assert len(set(keys)) == 6

    def test_unknown_type(self, builder: TokenMatrixBuilder) -> None:
        with pytest.raises(UnknownTypeError):
            builder.build_type_tokens("nav", "dashboard", "headline")

    def test_full_name_is_not_an_abbreviation(self, builder: TokenMatrixBuilder) -> None:
        """'subtitle' is the full name; the abbreviation is 'subt'."""
        with pytest.raises(UnknownTypeError):
            builder.build_type_tokens("nav", "dashboard", "subtitle")


class TestToneLayer:
    """Tests for Tone layer tokens."""

    def test_single_token(self, builder: TokenMatrixBuilder) -> None:
        tree = builder.build_tone_tokens("nav", "dashboard", "quirk")
        assert count_tokens(tree) == 1

    def test_references_type_layer(self, builder: TokenMatrixBuilder) -> None:
        tree = builder.build_tone_tokens("nav", "dashboard", "quirk")
        token = tree["nav"]["dashboard"]["tone--dashboard"]
        assert token["$value"] == "{nav.dashboard.type--quirk--dashboard}"

    def test_metadata(self, builder: TokenMatrixBuilder) -> None:
        tree = builder.build_tone_tokens("nav", "dashboard", "neut")
        figma = tree["nav"]["dashboard"]["tone--dashboard"]["$extensions"]["figma"]
        assert figma["scopes"] == ["TEXT_CONTENT"]
        assert figma["hiddenFromPublishing"] is False
        assert figma["referenceKey"] == "ref-0000"
        assert figma["codeSyntax"]["iOS"] == "navDashboardToneDashboard"

    def test_unknown_tone(self, builder: TokenMatrixBuilder) -> None:
        with pytest.raises(UnknownToneError):
            builder.build_tone_tokens("nav", "dashboard", "sarcastic")


class TestBuildAll:
    """Tests for building all 13 files at once."""

    def test_files_and_counts(self, builder: TokenMatrixBuilder, content: ContentMatrix) -> None:
        trees = builder.build_all("nav", "dashboard", content)
        assert list(trees) == [LANGUAGE_FILE] + [t.file for t in TYPES] + [t.file for t in TONES]
        counts = {file: count_tokens(tree) for file, tree in trees.items()}
        assert counts[LANGUAGE_FILE] == 36
        assert all(counts[t.file] == 6 for t in TYPES)
        assert all(counts[t.file] == 1 for t in TONES)
        assert sum(counts.values()) == 78

    def test_type_file_targets_its_type(
        self, builder: TokenMatrixBuilder, content: ContentMatrix
    ) -> None:
        trees = builder.build_all("nav", "dashboard", content)
        caption = get_nested(
            trees["Type.Caption.tokens.json"], ["nav", "dashboard", "type--mini--dashboard"]
        )
        assert caption["$value"] == "{nav.dashboard.minimal.lang--mini--capt--dashboard}"

    def test_deterministic_apart_from_reference_keys(self, content: ContentMatrix) -> None:
        first = TokenMatrixBuilder(reference_key_factory=lambda: "k").build_all(
            "nav", "dashboard", content
        )
        second = TokenMatrixBuilder(reference_key_factory=lambda: "k").build_all(
            "nav", "dashboard", content
        )
        assert first == second


class TestRandomReferenceKey:
    """Tests for the production reference key source."""

    def test_format(self) -> None:
        assert re.fullmatch(r"[0-9a-f]{40}", random_reference_key())

    def test_not_repeated(self) -> None:
        assert random_reference_key() != random_reference_key()
