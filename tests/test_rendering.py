"""
Character Rendering Test Suite

This module contains tests for codepoint and text descriptions:
- Escape notation width and padding
- Hex codepoint field
- Category and block fields
- UTF-8 byte listings
- Lone surrogates and unpaired surrogates in text
"""

import pytest

from quickchar.services import (
    NO_BLOCK,
    CharacterRenderingService,
    HtmlFormattingService,
    ResolverConfig,
    escape_notation,
    utf8_listing,
)

SAMPLE_CODEPOINTS = [0x0, 0x41, 0xE9, 0x7FF, 0x800, 0xFFFD, 0xFFFF, 0x10000, 0x1F352, 0xE0001, 0x10FFFF]


@pytest.fixture(scope="module")
def renderer(catalog):
    return CharacterRenderingService(catalog, HtmlFormattingService(ResolverConfig.create_default()))


def test_escape_width_follows_utf16_length(renderer):
    for codepoint in SAMPLE_CODEPOINTS:
        description = renderer.describe_codepoint(codepoint)
        if codepoint >= 0x10000:
            assert description.escape == "\\U" + f"{codepoint:X}".zfill(8)
            assert len(description.escape) == 10
        else:
            assert description.escape == "\\u" + f"{codepoint:X}".zfill(4)
            assert len(description.escape) == 6
        assert description.hex_codepoint == format(codepoint, "X")


def test_escape_notation_examples():
    assert escape_notation(0x41) == "\\u0041"
    assert escape_notation(0xE9) == "\\u00E9"
    assert escape_notation(0x1F352) == "\\U0001F352"


def test_utf8_listing_is_uppercase_hex():
    assert utf8_listing("\U0001F352") == "F0 9F 8D 92"
    assert utf8_listing("\u00e9") == "C3 A9"
    assert utf8_listing("A\n") == "41 A"


def test_describe_latin_letter(renderer):
    description = renderer.describe_codepoint(0x41)
    assert description.sample == "A"
    assert description.name == "LATIN CAPITAL LETTER A"
    assert description.category == "Lu"
    assert description.category_name == "Uppercase Letter"
    assert description.block == "Basic Latin"
    assert description.utf8 == "41"


def test_describe_cherries(renderer):
    description = renderer.describe_codepoint(0x1F352)
    assert description.name == "CHERRIES"
    assert description.category == "So"
    assert description.block == "Miscellaneous Symbols and Pictographs"
    assert description.utf8 == "F0 9F 8D 92"


def test_lone_surrogate_has_no_sample(renderer):
    description = renderer.describe_codepoint(0xD800)
    assert description.sample is None
    assert description.utf8 is None
    assert description.name is None
    assert description.category == "Cs"
    assert description.block == "High Surrogates"

    html = renderer.render_codepoint(0xD800)
    assert "charSample" not in html
    assert "UTF-8:" not in html
    assert "Surrogate (Cs)" in html


def test_codepoint_outside_any_block(renderer):
    # Gap between Kangxi Radicals and Ideographic Description Characters
    assert renderer.describe_codepoint(0x2FE0).block == NO_BLOCK


def test_control_character_has_no_name(renderer):
    description = renderer.describe_codepoint(0x0)
    assert description.name is None
    html = renderer.render_codepoint(0x0)
    assert "<div>None</div>" not in html


def test_render_text_lists_escapes_in_order(renderer):
    description = renderer.describe_text("a\u00e9\U0001F352")
    assert description.escapes == ("\\u0061", "\\u00E9", "\\U0001F352")
    assert description.utf8 == "61 C3 A9 F0 9F 8D 92"


def test_render_text_joins_surrogate_pairs(renderer):
    description = renderer.describe_text("x\ud83c\udf52")
    assert description.escapes == ("\\u0078", "\\U0001F352")
    assert description.sample == "x\U0001F352"


def test_render_text_of_single_pair_uses_codepoint_card(renderer):
    assert renderer.render_text("\ud83c\udf52").result == renderer.render_codepoint(0x1F352)
    assert renderer.render_text("\U0001F352").result == renderer.render_codepoint(0x1F352)


def test_render_text_rejects_unpaired_surrogate(renderer):
    result = renderer.render_text("ab\ud800")
    assert not result.success
    assert result.result == ""


def test_render_text_rejects_empty_text(renderer):
    assert not renderer.render_text("").success


def test_html_escapes_sample(renderer):
    html = renderer.render_codepoint(ord("<"))
    assert '<div class="charSample">&lt;</div>' in html
    text_html = renderer.render_text("<b>").result
    assert "&lt;b&gt;" in text_html


def test_text_escapes_are_search_links(renderer):
    html = renderer.render_text("\U0001F347\U0001F352").result
    assert '<a href="?q=%5CU0001F347">\\U0001F347</a>' in html
    assert '<a href="?q=%5CU0001F352">\\U0001F352</a>' in html
    assert html.index("%5CU0001F347") < html.index("%5CU0001F352")
    assert '<div class="fixed">F0 9F 8D 87 F0 9F 8D 92</div>' in html
