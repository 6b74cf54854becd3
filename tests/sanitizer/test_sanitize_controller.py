# tests/sanitizer/test_sanitize_controller.py
import colorsys
import logging
import random

import pytest
from bs4 import BeautifulSoup

from svg_sanitizer.color.transformer import ZeroJitter
from svg_sanitizer.controllers.sanitize_controller import MANUAL_REASON, SanitizeController
from svg_sanitizer.exceptions import InvalidScheme, ParseFailed, SourceNotFound
from svg_sanitizer.model import SanitizeOptions

STADIUM_SVG = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <style>.seat { fill: #ff0000; stroke: #00ff00; } .label { color: rgb(0, 0, 255); }</style>
  <g id="club-logo"><circle r="5" fill="#ff0000"/></g>
  <g id="section-a" class="stand">
    <rect id="seat-1" fill="#ff0000" stroke="#00ff00"/>
    <rect id="seat-2" fill="#FF0000" style="stroke: #00ff00; stroke-width: 2"/>
  </g>
  <g id="decoration">
    <path d="M0 0"/><path d="M1 1"/><path d="M2 2"/><polygon points="0,0"/><polygon points="1,1"/>
  </g>
  <text id="caption" fill="currentColor">Main stand</text>
</svg>"""


def _soup(content: str) -> BeautifulSoup:
    return BeautifulSoup(content, "xml")


def _structure(content: str):
    return [
        (tag.name, dict(tag.attrs), tag.string.strip() if tag.string else None)
        for tag in _soup(content).find_all(True)
    ]


def _zero_jitter_controller() -> SanitizeController:
    return SanitizeController(rng_factory=ZeroJitter)


def test_default_sanitize_removes_logo_and_decoration():
    result = SanitizeController().sanitize(STADIUM_SVG)
    assert result.success is True
    assert result.detected_logos == {
        "club-logo": "Contains keyword 'logo' in ID/class/data-name",
        "decoration": "Group contains 5 paths/polygons (likely decorative logo)",
    }
    assert result.removed_count == 2
    soup = _soup(result.content)
    assert soup.find(id="club-logo") is None
    assert soup.find(id="decoration") is None
    assert soup.find(id="seat-1") is not None


def test_round_trip_without_changes():
    """No detection, no scheme and no manual ids leaves the structure as it was."""
    result = SanitizeController().sanitize(STADIUM_SVG, SanitizeOptions(auto_detect=False))
    assert result.removed_count == 0
    assert result.detected_logos == {}
    assert _structure(result.content) == _structure(STADIUM_SVG)


def test_manual_ids_are_removed_and_reported():
    options = SanitizeOptions(auto_detect=False, manual_remove_ids=["caption"])
    result = SanitizeController().sanitize(STADIUM_SVG, options)
    assert result.detected_logos == {"caption": MANUAL_REASON}
    assert result.removed_count == 1
    assert _soup(result.content).find(id="caption") is None


def test_manual_id_keeps_keyword_reason():
    """A manual id that was also auto-detected keeps the detection reason."""
    options = SanitizeOptions(manual_remove_ids=["club-logo", "caption"])
    result = SanitizeController().sanitize(STADIUM_SVG, options)
    assert result.detected_logos["club-logo"] == "Contains keyword 'logo' in ID/class/data-name"
    assert result.detected_logos["caption"] == MANUAL_REASON
    assert list(result.detected_logos) == ["club-logo", "decoration", "caption"]
    # club-logo was already gone when the manual pass ran
    assert result.removed_count == 3


def test_manual_ids_unknown_are_reported_but_not_counted():
    options = SanitizeOptions(auto_detect=False, manual_remove_ids=["ghost"])
    result = SanitizeController().sanitize(STADIUM_SVG, options)
    assert result.detected_logos == {"ghost": MANUAL_REASON}
    assert result.removed_count == 0


def test_duplicate_ids_count_each_element():
    svg = '<svg><rect id="dup"/><circle id="dup"/><rect id="other"/></svg>'
    options = SanitizeOptions(auto_detect=False, manual_remove_ids=["dup"])
    result = SanitizeController().sanitize(svg, options)
    assert result.removed_count == 2
    assert _soup(result.content).find(id="dup") is None


def test_custom_keywords_extend_detection():
    options = SanitizeOptions(custom_keywords=["CAPTION"])
    result = SanitizeController().sanitize(STADIUM_SVG, options)
    assert result.detected_logos["caption"] == "Contains keyword 'caption' in ID/class/data-name"


def test_auto_detect_disabled_keeps_everything():
    result = SanitizeController().sanitize(STADIUM_SVG, SanitizeOptions(auto_detect=False, color_scheme="blue"))
    assert result.removed_count == 0
    assert _soup(result.content).find(id="club-logo") is not None


def test_identical_colors_get_identical_output_everywhere():
    """One cache per call: attributes, inline styles and stylesheets agree."""
    result = SanitizeController(rng_factory=lambda: random.Random()).sanitize(
        STADIUM_SVG, SanitizeOptions(color_scheme="blue")
    )
    soup = _soup(result.content)
    seat1 = soup.find(id="seat-1")
    seat2 = soup.find(id="seat-2")

    red_out = seat1["fill"]
    green_out = seat1["stroke"]
    assert red_out != "#ff0000"
    assert seat2["fill"] == red_out
    assert seat2["style"] == f"stroke: {green_out}; stroke-width: 2"

    css = soup.find("style").get_text()
    assert f"fill: {red_out};" in css
    assert f"stroke: {green_out};" in css


def test_exact_colors_with_zero_jitter():
    result = _zero_jitter_controller().sanitize(
        STADIUM_SVG, SanitizeOptions(auto_detect=False, color_scheme="green")
    )
    soup = _soup(result.content)
    assert soup.find(id="seat-1")["fill"] == "#00ff00"
    assert ".label { color: #00ff00; }" in soup.find("style").get_text()


def test_unparseable_colors_pass_through():
    result = SanitizeController().sanitize(STADIUM_SVG, SanitizeOptions(color_scheme="purple"))
    assert _soup(result.content).find(id="caption")["fill"] == "currentColor"


def test_none_fill_untouched():
    svg = '<svg><rect id="r" fill="none" stroke="" style="fill:none"/></svg>'
    result = SanitizeController().sanitize(svg, SanitizeOptions(color_scheme="teal"))
    rect = _soup(result.content).find(id="r")
    assert rect["fill"] == "none"
    assert rect["stroke"] == ""
    assert rect["style"] == "fill:none"


def test_red_scheme_hue_window():
    svg = '<svg><rect id="a" fill="#3366cc"/><rect id="b" fill="#22aa44"/></svg>'
    controller = SanitizeController(rng_factory=lambda: random.Random(3))
    result = controller.sanitize(svg, SanitizeOptions(color_scheme="red"))
    soup = _soup(result.content)
    for element_id in ("a", "b"):
        value = soup.find(id=element_id)["fill"]
        r, g, b = (int(value[i:i + 2], 16) / 255 for i in (1, 3, 5))
        hue = colorsys.rgb_to_hls(r, g, b)[0] * 360
        assert min(hue, 360 - hue) <= 12


def test_seeded_runs_are_reproducible():
    options = SanitizeOptions(color_scheme="orange")
    first = SanitizeController(rng_factory=lambda: random.Random(7)).sanitize(STADIUM_SVG, options)
    second = SanitizeController(rng_factory=lambda: random.Random(7)).sanitize(STADIUM_SVG, options)
    assert first.content == second.content


def test_result_carries_scheme():
    result = SanitizeController().sanitize(STADIUM_SVG, SanitizeOptions(color_scheme="teal"))
    assert result.color_scheme == "teal"


def test_invalid_scheme_rejected_before_parsing():
    """An unknown scheme fails even for input that would not parse."""
    with pytest.raises(InvalidScheme) as exc:
        SanitizeController().sanitize("", SanitizeOptions(color_scheme="magenta"))
    assert exc.value.scheme == "magenta"
    assert "green" in str(exc.value)


def test_parse_failure():
    with pytest.raises(ParseFailed):
        SanitizeController().sanitize("not an svg")


def test_sanitize_file(tmp_path):
    path = tmp_path / "map.svg"
    path.write_text(STADIUM_SVG, encoding="utf-8")
    result = SanitizeController().sanitize_file(path)
    assert result.removed_count == 2


def test_sanitize_file_missing(tmp_path):
    with pytest.raises(SourceNotFound):
        SanitizeController().sanitize_file(tmp_path / "missing.svg")


def test_detect_colors():
    svg = '<svg><rect fill="#112233" style="stroke: rgb(1,2,3)"/></svg>'
    assert set(SanitizeController.detect_colors(svg)) == {"#112233", "#010203"}


def test_detect_colors_all_surfaces_deduplicated():
    colors = SanitizeController.detect_colors(STADIUM_SVG)
    assert sorted(colors) == ["#0000ff", "#00ff00", "#ff0000"]


def test_detect_colors_skips_invalid_and_cdata():
    svg = (
        '<svg><style><![CDATA[.a { background-color: #ABC; fill: none }]]></style>'
        '<rect fill="none" stroke="red" style="color: #12345"/></svg>'
    )
    assert SanitizeController.detect_colors(svg) == ["#aabbcc"]


def test_detect_colors_does_not_mutate():
    controller = SanitizeController()
    controller.detect_colors(STADIUM_SVG)
    result = controller.sanitize(STADIUM_SVG, SanitizeOptions(auto_detect=False))
    assert _structure(result.content) == _structure(STADIUM_SVG)


def test_commented_css_matches_attribute_colors():
    svg = (
        '<svg><style>.a { /* primary */ fill: #ff0000 } .b { fill: #ff0000; /* a; b */ stroke: #ff0000 }</style>'
        '<rect id="r" fill="#ff0000" style="/* x */ fill: #ff0000"/></svg>'
    )
    result = SanitizeController(rng_factory=lambda: random.Random(5)).sanitize(
        svg, SanitizeOptions(auto_detect=False, color_scheme="green")
    )
    soup = _soup(result.content)
    rect = soup.find(id="r")
    out = rect["fill"]
    assert out != "#ff0000"
    assert rect["style"] == f"/* x */ fill: {out}"
    assert soup.find("style").get_text() == (
        f".a {{ /* primary */ fill: {out} }} .b {{ fill: {out}; /* a; b */ stroke: {out} }}"
    )


def test_detect_colors_sees_commented_declarations():
    assert SanitizeController.detect_colors('<svg><style>.a { /* c */ fill: #112233 }</style></svg>') == ["#112233"]


def test_flagged_root_is_reported_but_kept(caplog):
    caplog.set_level(logging.DEBUG, logger="svg_sanitizer")
    svg = '<svg id="brand-logo"><rect id="watermark"/><rect id="seat-9"/></svg>'
    result = SanitizeController().sanitize(svg)
    assert list(result.detected_logos) == ["brand-logo", "watermark"]
    assert result.removed_count == 1
    soup = _soup(result.content)
    assert soup.find("svg")["id"] == "brand-logo"
    assert soup.find(id="seat-9") is not None
    assert "Keeping root element 'brand-logo'" in caplog.text
