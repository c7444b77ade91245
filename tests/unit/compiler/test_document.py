import copy
import logging
from typing import Optional, get_type_hints

import pytest

from blockliquid.compiler.document import extract_styles, join_styles, model_to_liquid
from blockliquid.compiler.blocks import block_to_liquid
from blockliquid.types import Document, Element

CONTAINER_OPEN = (
    '<div class="builder-content" builder-content-id="c1" '
    'data-builder-content-id="c1" data-builder-component="page" builder-model="page">'
)
STYLES_OPEN = '<style type="text/css" class="builder-styles">'


# -------------------------------
# Fixtures & helper functions
# -------------------------------

def make_content(*blocks) -> dict:
    return {"id": "c1", "modelName": "page", "data": {"blocks": list(blocks)}}

@pytest.fixture
def red_block() -> dict:
    return {"id": "b1", "responsiveStyles": {"large": {"color": "red"}}}

@pytest.fixture
def responsive_content() -> dict:
    return make_content(
        {
            "id": "hero",
            "tagName": "section",
            "class": "hero",
            "responsiveStyles": {
                "large": {"display": "flex", "paddingTop": "40px"},
                "medium": {"paddingTop": "20px"},
                "small": {"display": "block"},
            },
            "children": [
                {"id": "title", "tagName": "h1",
                 "responsiveStyles": {"large": {"fontSize": "32px"},
                                      "small": {"fontSize": "20px"}}},
            ],
        },
        {"id": "footer"},
    )


# -------------------------------
# Tests for model_to_liquid
# -------------------------------

def test_model_to_liquid_inline_styles(red_block):
    out = model_to_liquid(make_content(red_block))
    assert out == {
        "html": (
            STYLES_OPEN + ".builder-block.b1 { color: red;}</style>"
            + CONTAINER_OPEN
            + '<div builder-id="b1" class="builder-block b1"></div></div>'
        )
    }
    assert "css" not in out

def test_model_to_liquid_extract_css(red_block):
    out = model_to_liquid(make_content(red_block), extract_css=True)
    assert out == {
        "html": CONTAINER_OPEN + '<div builder-id="b1" class="builder-block b1"></div></div>',
        "css": ".builder-block.b1 { color: red;}",
    }
    assert "<style" not in out["html"]

def test_model_to_liquid_same_css_in_both_modes(responsive_content):
    inline = model_to_liquid(responsive_content)["html"]
    split = model_to_liquid(responsive_content, extract_css=True)
    assert inline == f"{STYLES_OPEN}{split['css']}</style>{split['html']}"

def test_model_to_liquid_responsive_css(responsive_content):
    css = model_to_liquid(responsive_content, extract_css=True)["css"]
    assert css == (
        ".builder-block.hero { display: flex; padding-top: 40px;} "
        "@media only screen and (max-width: 991px) { .builder-block.hero { padding-top: 20px; } } "
        "@media only screen and (max-width: 640px) { .builder-block.hero { display: block; } } "
        ".builder-block.title { font-size: 32px;} "
        "@media only screen and (max-width: 640px) { .builder-block.title { font-size: 20px; } } "
        ".builder-block.footer {}"
    )

def test_model_to_liquid_email_mode(responsive_content):
    css = model_to_liquid(responsive_content, extract_css=True, email_mode=True)["css"]
    assert css == (
        "@media only screen and (max-width: 991px) { .hero-subject { padding-top: 20px !important; } } "
        "@media only screen and (max-width: 640px) { .hero-subject { display: block !important; } } "
        "@media only screen and (max-width: 640px) { .title-subject { font-size: 20px !important; } }"
    )
    assert ".builder-block" not in css

def test_model_to_liquid_model_name_override(red_block):
    html = model_to_liquid(make_content(red_block), "other", extract_css=True)["html"]
    assert 'data-builder-component="other"' in html
    assert 'builder-model="other"' in html
    assert 'builder-content-id="c1"' in html

def test_model_to_liquid_model_name_is_optional(red_block):
    assert get_type_hints(model_to_liquid)["model_name"] == Optional[str]
    out = model_to_liquid(make_content(red_block), None, extract_css=True)
    assert 'builder-model="page"' in out["html"]

def test_model_to_liquid_accepts_document_record():
    doc = Document(id="c1", model_name="page", blocks=[Element(id="b1")])
    out = model_to_liquid(doc, extract_css=True)
    assert out["html"].startswith(CONTAINER_OPEN)
    assert out["css"] == ".builder-block.b1 {}"

@pytest.mark.parametrize("content", [
    {"id": "c1", "modelName": "page"},
    {"id": "c1", "modelName": "page", "data": {}},
    {"id": "c1", "modelName": "page", "data": {"blocks": []}},
    {"id": "c1", "modelName": "page", "data": {"blocks": None}},
])
def test_model_to_liquid_empty_tree(content):
    out = model_to_liquid(content, extract_css=True)
    assert out == {"html": CONTAINER_OPEN + "</div>", "css": ""}
    assert model_to_liquid(content) == {"html": STYLES_OPEN + "</style>" + CONTAINER_OPEN + "</div>"}

@pytest.mark.parametrize("blocks", [[None], ["not-a-block"], [42, ("a", "b")]])
def test_model_to_liquid_skips_non_mapping_blocks(blocks, caplog):
    with caplog.at_level(logging.WARNING):
        out = model_to_liquid(make_content(*blocks), extract_css=True)
    assert out == {"html": CONTAINER_OPEN + "</div>", "css": ""}
    assert "Skipping malformed block" in caplog.text

@pytest.mark.parametrize("block, css", [
    ({"id": "a", "responsiveStyles": {"large": "color: red"}}, ".builder-block.a {}"),
    ({"id": "a", "responsiveStyles": ["large"]}, ".builder-block.a {}"),
    ({"id": "a", "responsiveStyles": "large"}, ".builder-block.a {}"),
    ({"id": "a", "responsiveStyles": {"large": {"color": "red"}, "small": 3}},
     ".builder-block.a { color: red;}"),
])
def test_model_to_liquid_malformed_styles_are_absent(block, css):
    out = model_to_liquid(make_content(block), extract_css=True)
    assert out["css"] == css
    assert '<div builder-id="a" class="builder-block a"></div>' in out["html"]

@pytest.mark.parametrize("children", ["oops", 7, {"id": "x"}, [None, "oops"]])
def test_model_to_liquid_malformed_children_are_dropped(children):
    out = model_to_liquid(make_content({"id": "a", "children": children}), extract_css=True)
    assert out["html"] == (
        CONTAINER_OPEN + '<div builder-id="a" class="builder-block a"></div></div>')

def test_model_to_liquid_malformed_properties_are_absent():
    out = model_to_liquid(make_content({"id": "a", "properties": "x"}), extract_css=True)
    assert '<div builder-id="a" class="builder-block a"></div>' in out["html"]

def test_model_to_liquid_is_deterministic(responsive_content):
    first = model_to_liquid(responsive_content, extract_css=True)
    second = model_to_liquid(responsive_content, extract_css=True)
    assert first == second

def test_model_to_liquid_does_not_mutate_input(responsive_content):
    snapshot = copy.deepcopy(responsive_content)
    model_to_liquid(responsive_content, email_mode=True)
    assert responsive_content == snapshot

def test_model_to_liquid_identical_bodies_keep_own_selectors():
    content = make_content(
        {"id": "a", "responsiveStyles": {"large": {"color": "red"}}},
        {"id": "b", "responsiveStyles": {"large": {"color": "red"}}},
    )
    css = model_to_liquid(content, extract_css=True)["css"]
    assert css == ".builder-block.a { color: red;} .builder-block.b { color: red;}"

def test_model_to_liquid_exact_duplicates_collapse(caplog):
    block = {"id": "a", "responsiveStyles": {"large": {"color": "red"}}}
    content = make_content(block, dict(block))
    with caplog.at_level(logging.WARNING):
        out = model_to_liquid(content, extract_css=True)
    assert out["css"] == ".builder-block.a { color: red;}"
    assert out["html"].count('builder-id="a"') == 2
    assert "duplicate element ids" in caplog.text

def test_model_to_liquid_strict_ids():
    content = make_content({"id": "a"}, {"id": "b", "children": [{"id": "a"}]})
    with pytest.raises(ValueError, match="Duplicate element ids found"):
        model_to_liquid(content, strict_ids=True)

def test_model_to_liquid_attribute_order():
    content = make_content({"id": "b1", "properties": {"data-x": "1"}, "class": "foo"})
    html = model_to_liquid(content, extract_css=True)["html"]
    assert '<div data-x="1" builder-id="b1" class="builder-block b1 foo"></div>' in html

def test_model_to_liquid_invalid_type():
    with pytest.raises(TypeError):
        model_to_liquid(42)

def test_model_to_liquid_empty_content_warns(caplog):
    with caplog.at_level(logging.WARNING):
        model_to_liquid({"id": "c1"}, report_name="landing")
    assert "Content 'landing' has no blocks" in caplog.text

def test_model_to_liquid_verbose_logs(red_block, caplog):
    with caplog.at_level(logging.INFO):
        model_to_liquid(make_content(red_block), verbose=True, report_name="landing")
    assert "'landing' was successfully compiled" in caplog.text

def test_model_to_liquid_debug_logs_blocks(red_block, caplog):
    with caplog.at_level(logging.DEBUG):
        model_to_liquid(make_content(red_block), debug=True)
    assert "Block 'b1' was successfully compiled" in caplog.text

def test_model_to_liquid_restores_log_level(red_block):
    logger = logging.getLogger("blockliquid.compiler.document")
    level = logger.level
    model_to_liquid(make_content(red_block), debug=True)
    assert logger.level == level

# -------------------------------
# Tests for extract_styles
# -------------------------------

def test_extract_styles_strips_all_style_tags():
    html, css = extract_styles(
        '<style>.a {}</style><p>x</p><style type="text/css">\n.b {\n  color: red;}\n</style>')
    assert html == "<p>x</p>"
    assert css == ".a {} .b { color: red;}"

def test_extract_styles_collapses_exact_duplicates():
    html, css = extract_styles("<style>.a {}</style><i></i><style>.a {}</style>")
    assert (html, css) == ("<i></i>", ".a {}")

def test_extract_styles_without_styles():
    assert extract_styles("<p>plain</p>") == ("<p>plain</p>", "")

def test_extract_styles_matches_structured_collection(responsive_content):
    blocks = responsive_content["data"]["blocks"]
    rendered = "".join(block_to_liquid(block) for block in blocks)
    html, css = extract_styles(rendered)
    compiled = model_to_liquid(responsive_content, extract_css=True)
    assert css == compiled["css"]
    assert compiled["html"] == CONTAINER_OPEN + html + "</div>"

# -------------------------------
# Tests for join_styles
# -------------------------------

def test_join_styles_decodes_entities():
    assert join_styles(['.a &gt; .b {\n  content: &quot;x&quot;;}']) == '.a > .b { content: "x";}'

def test_join_styles_drops_empty_declarations():
    assert join_styles([".a {\n  color: ;\n  top: 0;}"]) == ".a { top: 0;}"

def test_join_styles_empty():
    assert join_styles([]) == ""
    assert join_styles(["", "  \n"]) == ""
