from converter.models import ColorNotation
from converter.tokenizer import extract_colors, iter_color_tokens, match_color

CSS = """:root {
  --primary: #6750A4;
  --accent-rgb: RGB(103, 80, 164);
  --accent-hsl: hsla(200, 80%, 60%, 0.5);
  --fancy: oklch(59.69% 0.154 292.34 / 50%);
}
.card { color: red; margin: 10px; }
"""


def test_tokens_in_document_order():
    tokens = list(iter_color_tokens(CSS))
    assert [t.text for t in tokens] == [
        "#6750A4",
        "RGB(103, 80, 164)",
        "hsla(200, 80%, 60%, 0.5)",
        "oklch(59.69% 0.154 292.34 / 50%)",
    ]
    assert [t.notation for t in tokens] == [
        ColorNotation.HEX,
        ColorNotation.RGB,
        ColorNotation.HSL,
        ColorNotation.OKLCH,
    ]


def test_token_spans_point_into_the_text():
    for t in iter_color_tokens(CSS):
        assert CSS[t.start:t.end] == t.text


def test_spans_do_not_overlap():
    tokens = list(iter_color_tokens(CSS))
    for prev, nxt in zip(tokens, tokens[1:]):
        assert prev.end <= nxt.start


def test_scan_is_deterministic():
    assert extract_colors(CSS) == extract_colors(CSS)
    assert extract_colors(CSS) == [t.text for t in iter_color_tokens(CSS)]


def test_named_colors_and_lengths_are_ignored():
    assert extract_colors(".card { color: red; margin: 10px; }") == []


def test_hex_run_of_any_length_three_to_eight_is_a_token():
    assert extract_colors("a #12345 b") == ["#12345"]
    assert extract_colors("#abcdefgh") == ["#abcdef"]
    assert extract_colors("#ab") == []


def test_empty_text():
    assert extract_colors("") == []


def test_match_color_standalone():
    token = match_color("  #abc ")
    assert token is not None
    assert token.text == "#abc"
    assert token.notation == ColorNotation.HEX


def test_match_color_rejects_surrounding_text():
    assert match_color("#abc def") is None
    assert match_color("color: #abc") is None
    assert match_color("red") is None
