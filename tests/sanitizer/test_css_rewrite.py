# tests/sanitizer/test_css_rewrite.py
from svg_sanitizer.color.css import (
    CSS_COLOR_PROPERTIES,
    STYLE_COLOR_PROPERTIES,
    iter_declaration_values,
    iter_stylesheet_values,
    rewrite_declarations,
    rewrite_stylesheet,
    split_declarations,
)


def black(value):
    return "#000000" if value.startswith("#") or value.lower().startswith("rgb") else None


def test_rewrite_only_color_token():
    """Other declarations, separators and whitespace stay byte-identical."""
    style = "fill: #f00; stroke-width: 2px;stroke:rgb(1,2,3) ; opacity:.5"
    result = rewrite_declarations(style, STYLE_COLOR_PROPERTIES, black)
    assert result == "fill: #000000; stroke-width: 2px;stroke:#000000 ; opacity:.5"


def test_similar_property_names_untouched():
    """stop-color, flood-color and fill-opacity are different properties."""
    style = "stop-color:#f00;flood-color: #0f0;fill-opacity:0.3"
    assert rewrite_declarations(style, CSS_COLOR_PROPERTIES, black) == style


def test_none_and_unknown_values_untouched():
    style = "fill:none;stroke: currentColor"
    assert rewrite_declarations(style, STYLE_COLOR_PROPERTIES, black) == style


def test_important_flag_kept():
    result = rewrite_declarations("fill: #f00 !important", STYLE_COLOR_PROPERTIES, black)
    assert result == "fill: #000000 !important"


def test_property_names_case_insensitive():
    assert rewrite_declarations("FILL: #f00", STYLE_COLOR_PROPERTIES, black) == "FILL: #000000"


def test_style_attribute_ignores_color_property():
    """Inline styles only rewrite fill and stroke."""
    style = "color: #f00; fill: #f00"
    assert rewrite_declarations(style, STYLE_COLOR_PROPERTIES, black) == "color: #f00; fill: #000000"


def test_rewrite_stylesheet_blocks():
    css = ".a{fill:#f00}\n.b { color: #0f0; background-color: rgb(1,2,3); }\n@media print{.c{stroke:#00f;}}"
    result = rewrite_stylesheet(css, CSS_COLOR_PROPERTIES, black)
    assert result == (
        ".a{fill:#000000}\n.b { color: #000000; background-color: #000000; }\n"
        "@media print{.c{stroke:#000000;}}"
    )


def test_iter_declaration_values():
    values = list(iter_declaration_values("fill:#111; stroke : rgb(1,2,3); width:2", CSS_COLOR_PROPERTIES))
    assert values == ["#111", "rgb(1,2,3)"]


def test_iter_stylesheet_values():
    css = ".a { fill: #123 } .b { color: red; stop-color: #456 }"
    assert list(iter_stylesheet_values(css, CSS_COLOR_PROPERTIES)) == ["#123", "red"]


def test_split_declarations_ignores_separators_in_comments():
    text = "fill:#f00; /* a; b */ stroke:#0f0"
    assert split_declarations(text) == ["fill:#f00", " /* a; b */ stroke:#0f0"]
    assert ";".join(split_declarations(text)) == text


def test_leading_comment_does_not_hide_declaration():
    assert rewrite_declarations("/* x */ fill: #f00", STYLE_COLOR_PROPERTIES, black) == "/* x */ fill: #000000"


def test_trailing_comment_kept():
    result = rewrite_declarations("fill: #f00 /* brand red */; stroke: #0f0", STYLE_COLOR_PROPERTIES, black)
    assert result == "fill: #000000 /* brand red */; stroke: #000000"


def test_semicolon_in_comment_does_not_hide_next_declaration():
    css = ".a { fill: #ff0000; /* a; b */ stroke: #ff0000 }"
    result = rewrite_stylesheet(css, CSS_COLOR_PROPERTIES, black)
    assert result == ".a { fill: #000000; /* a; b */ stroke: #000000 }"


def test_braces_in_comments_do_not_cut_blocks():
    css = "/* .x { fill: #111 } */ .a { /* } */ fill: #f00 }"
    result = rewrite_stylesheet(css, CSS_COLOR_PROPERTIES, black)
    assert result == "/* .x { fill: #111 } */ .a { /* } */ fill: #000000 }"


def test_commented_media_block_rewrites_inner_rule():
    css = "@media print { /* x */ .c { stroke: #00f } /* y */ }"
    result = rewrite_stylesheet(css, CSS_COLOR_PROPERTIES, black)
    assert result == "@media print { /* x */ .c { stroke: #000000 } /* y */ }"


def test_iter_values_with_comments():
    css = ".a { /* c */ fill: #112233 } /* .b { color: #445566 } */ .c { color: #0f0; /* d; */ stroke: #abc }"
    assert list(iter_stylesheet_values(css, CSS_COLOR_PROPERTIES)) == ["#112233", "#0f0", "#abc"]
