"""
Block tree compiler.

This package turns block trees into static markup. It is organised
leaf-first:

- **synthesizers**: attribute and CSS declaration formatting.
- **styles**: per-element CSS, a base rule plus ``max-width`` media queries.
- **blocks**: recursive element serialization.
- **document**: whole-document compilation with stylesheet collection.
- **embed**: the runtime tag consumed by client renderers.

Functions
---------
model_to_liquid(content, model_name, extract_css, email_mode, **kwargs)
    Compile a document into ``{"html": ...}`` or ``{"html": ..., "css": ...}``.
block_to_liquid(element, email_mode, extract_css)
    Render one element tree to markup with inline ``<style>`` blocks.
block_css(element, email_mode)
    Return the CSS of a single element.
extract_styles(html)
    Strip inline ``<style>`` blocks out of rendered markup.
map_to_attributes(mapping)
    Serialize an attribute mapping.
map_to_css(mapping, spaces, important)
    Serialize a style mapping into CSS declarations.
render_component_element(blocks, model, key, options, rev, prerender, editing)
    Build the client-side embed tag around compiled output.

Examples
--------
>>> from blockliquid.compiler import model_to_liquid
>>> out = model_to_liquid(
...     {"id": "c1", "modelName": "page", "data": {"blocks": [{"id": "b1"}]}},
...     extract_css=True)
>>> out["css"]
'.builder-block.b1 {}'
"""

from .synthesizers import map_to_attributes, map_to_css
from .styles import block_css
from .blocks import block_to_liquid, iter_fragments
from .document import extract_styles, join_styles, model_to_liquid
from .embed import render_component_element

__all__ = [
    "map_to_attributes",
    "map_to_css",
    "block_css",
    "block_to_liquid",
    "iter_fragments",
    "model_to_liquid",
    "extract_styles",
    "join_styles",
    "render_component_element",
]
