"""
Runtime embed tag for client-side rendering.

A client renderer picks compiled content up from a
``<builder-component-element>`` tag: the pre-rendered markup (and its
styles) live inside the tag, and the attributes tell the renderer which
model and options to hydrate with.

Functions
---------
render_component_element(blocks, model, key, options, rev, prerender, editing)
    Build the embed tag around compiled output.

Notes
-----
- Deciding *whether* content should be rendered server-side or client-side
  is left to the host; this module only produces the tag.
- `options` is JSON-serialized into a single-quoted attribute without HTML
  encoding. A single quote inside an option value breaks the tag, so
  untrusted option data must not be passed here.
"""

import json
from typing import Any, Mapping, Optional

from .synthesizers import map_to_attributes

EMBED_TAG = "builder-component-element"


def _placeholder(model: str) -> str:
    name = f' name="{model}"' if model else ""
    return f'<{EMBED_TAG} prerender="false"{name}></{EMBED_TAG}>'


def render_component_element(
    blocks: Optional[Mapping[str, Any]] = None,
    model: str = "",
    key: str = "",
    options: Optional[Mapping[str, Any]] = None,
    rev: str = "",
    prerender: bool = True,
    editing: bool = False,
) -> str:
    """
    Build the ``<builder-component-element>`` tag around compiled output.

    Parameters
    ----------
    blocks : Mapping, optional
        Compiled output, usually from `model_to_liquid` with
        ``extract_css=True``: ``html`` holds the markup, ``css`` the
        optional stylesheet and ``rev`` an optional content revision.
        A sequence of raw blocks (not yet compiled) is treated as missing.
    model : str, default=''
        Model name, written to the ``name`` attribute when not empty.
    key : str, default=''
        Cache key of the content; falls back to `model`.
    options : Mapping, optional
        Content options forwarded to the client renderer as JSON.
    rev : str, default=''
        Revision written when `blocks` carries none.
    prerender : bool, default=True
        If False, return an empty tag so the client renders from scratch.
    editing : bool, default=False
        When no compiled markup is available, return an empty tag instead
        of ``""`` so an editor can attach to it.

    Returns
    -------
    str
        The embed tag, or ``""`` when there is nothing to embed.

    Examples
    --------
    >>> render_component_element(prerender=False, model="page")
    '<builder-component-element prerender="false" name="page"></builder-component-element>'
    >>> render_component_element(
    ...     {"html": "<div></div>", "css": ".a {}"}, model="page", options={"x": 1})
    '<builder-component-element key="page" options=\\'{"x": 1}\\' prerender="false" rev="" name="page"><style class="builder-styles">.a {}</style><div></div></builder-component-element>'
    """
    if not prerender:
        return _placeholder(model)

    fallback = _placeholder(model) if editing else ""
    if not isinstance(blocks, Mapping) or not blocks.get("html"):
        return fallback

    html = blocks["html"]
    css = blocks.get("css")
    if css:
        html = f'<style class="builder-styles">{css}</style>{html}'

    attributes = map_to_attributes({"key": key or model})
    attributes += f" options='{json.dumps(options)}'"
    attributes += map_to_attributes(
        {"prerender": "false", "rev": blocks.get("rev") or rev or ""}
    )
    if model:
        attributes += map_to_attributes({"name": model})
    return f"<{EMBED_TAG}{attributes}>{html}</{EMBED_TAG}>"
