"""
Document compiler for block trees.

This module compiles a whole content document into static markup for
server-side template systems (store-front templating, email). It wraps the
top-level blocks in a container carrying the document identity, gathers
the CSS of every element into one de-duplicated stylesheet and returns it
either inlined in front of the markup or as a separate string.

Functions
---------
model_to_liquid(content, model_name, extract_css, email_mode, **kwargs)
    Compile a document into ``{"html": ...}`` or ``{"html": ..., "css": ...}``.
    Acts as the main public entry point.
extract_styles(html)
    Strip inline ``<style>`` blocks out of rendered markup and return the
    markup together with the combined CSS.
join_styles(style_bodies)
    De-duplicate and normalize a sequence of CSS bodies into one string.

Notes
-----
- Style bodies are de-duplicated by exact text only. Two elements with
  identical declarations still get one rule each because their selectors
  differ.
- The compiler never fails on missing or malformed block data: absent
  blocks give an empty container, absent styles give empty rules and
  malformed nodes are skipped.
- Compilation is a pure string transform with no file or network access.
- Attribute values are written unescaped (see `map_to_attributes`).

Examples
--------
>>> from blockliquid.compiler import model_to_liquid
>>> content = {
...     "id": "c1",
...     "modelName": "page",
...     "data": {"blocks": [{
...         "id": "b1", "responsiveStyles": {"large": {"color": "red"}}}]},
... }
>>> out = model_to_liquid(content, extract_css=True)
>>> out["css"]
'.builder-block.b1 { color: red;}'
>>> out["html"][:40]
'<div class="builder-content" builder-con'
"""

import re
import logging
from contextlib import nullcontext
from typing import Iterable, Optional

from blockliquid._utils import (
    collect_duplicate_ids,
    read_config,
    temp_log_level,
    validate_unique_ids,
)
from blockliquid.types import Document, to_document

from .blocks import MARKUP, STYLE, iter_fragments
from .synthesizers import map_to_attributes

logger = logging.getLogger(__name__)

_MESSAGES = read_config("messages")
ERR_MSG_DUPLICATE_IDS_F = _MESSAGES["errors"]["duplicate_ids_f"]
WARN_MSG_DUPLICATE_IDS_F = _MESSAGES["warnings"]["duplicate_ids_f"]
WARN_MSG_EMPTY_CONTENT_F = _MESSAGES["warnings"]["empty_content_f"]

CONTENT_CLASS = "builder-content"
STYLES_TAG_OPEN = '<style type="text/css" class="builder-styles">'

STYLE_TAG_PATTERN = re.compile(r"<style.*?>([\s\S]*?)</style>")
EMPTY_DECLARATION_PATTERN = re.compile(r" \S+:\s+;")
WHITESPACE_PATTERN = re.compile(r"\s+")


def model_to_liquid(
    content,
    model_name: Optional[str] = None,
    extract_css: bool = False,
    email_mode: bool = False,
    **kwargs,
) -> dict:
    """
    Compile a content document into static markup.

    The top-level blocks are serialized depth-first inside a container
    ``<div>`` carrying the document identity attributes. The CSS of every
    element is collected along the way, de-duplicated by exact text and
    normalized into one stylesheet.

    Parameters
    ----------
    content : Document or Mapping
        The document to compile. Mappings follow the content schema
        (``id``, ``modelName``, ``data.blocks``) and are converted with
        `Document.from_dict`.
    model_name : str, optional
        Model name written to ``data-builder-component`` and
        ``builder-model``. Defaults to the document's own model name.
    extract_css : bool, default=False
        Return the stylesheet under a separate ``css`` key instead of
        prefixing it to the markup as a ``<style>`` tag.
    email_mode : bool, default=False
        Emit email-client-safe styles: no base rules, ``.<id>-subject``
        selectors and ``!important`` declarations in media queries.

    Other parameters
    ----------------
    report_name : str, default='content'
        Identifier of the content in log messages.
    strict_ids : bool, default=False
        Raise a `ValueError` when element ids are not unique. By default a
        warning is logged and compilation proceeds.
    verbose : bool, default=False
        Enables info-level logging during the function execution.
    debug : bool, default=False
        Enables debug-level logging during the function execution.
        Takes precedence over the 'verbose' parameter.

    Returns
    -------
    dict
        ``{"html": str}`` with the stylesheet inlined, or
        ``{"html": str, "css": str}`` when `extract_css` is set.

    Raises
    ------
    TypeError
        If `content` is neither a `Document` nor a mapping.
    ValueError
        If `strict_ids` is set and element ids collide.

    Notes
    -----
    - Compiling the same document twice yields byte-identical output.
    - Inputs are never mutated.
    - Blocks and children that are not mappings are skipped with a
      warning; they never make the compilation fail.

    Examples
    --------
    >>> out = model_to_liquid({"id": "c1", "modelName": "page"})
    >>> out["html"]
    '<style type="text/css" class="builder-styles"></style><div class="builder-content" builder-content-id="c1" data-builder-content-id="c1" data-builder-component="page" builder-model="page"></div>'
    """
    params = {
        "report_name": kwargs.get("report_name", "content"),
        "strict_ids": kwargs.get("strict_ids", False),
        "debug": kwargs.get("debug", False),
        "verbose": kwargs.get("verbose", False),
    }
    document = to_document(content)
    model = model_name if model_name is not None else document.model_name

    # Optionally enable temp log context
    if params["debug"]:
        context = temp_log_level(logger, level=logging.DEBUG)
    elif params["verbose"]:
        context = temp_log_level(logger, level=logging.INFO)
    else:
        context = nullcontext()
    with context:
        logger.info("Compiling '%s' (id=%s)", params["report_name"], document.id)
        _check_ids(document, params["report_name"], strict=params["strict_ids"])

        html_parts = []
        style_bodies = []
        for block in document.blocks:
            for fragment in iter_fragments(
                block, email_mode=email_mode, extract_css=extract_css
            ):
                if fragment.kind == STYLE:
                    style_bodies.append(fragment.text)
                elif fragment.kind == MARKUP:
                    html_parts.append(fragment.text)
            logger.debug("Block '%s' was successfully compiled", block.id)
        if not document.blocks:
            logger.warning(WARN_MSG_EMPTY_CONTENT_F, params["report_name"])

        html = _wrap_container(document, model, "".join(html_parts))
        css = join_styles(style_bodies)

        if extract_css:
            result = {"html": html, "css": css}
        else:
            result = {"html": f"{STYLES_TAG_OPEN}{css}</style>{html}"}

        logger.info("'%s' was successfully compiled", params["report_name"])
        return result


def extract_styles(html: str) -> tuple[str, str]:
    """
    Strip inline ``<style>`` blocks out of rendered markup.

    Every ``<style ...>...</style>`` span (non-greedy, across lines) is
    removed from `html`; the bodies are combined with `join_styles`.

    Parameters
    ----------
    html : str
        Markup, typically produced by `block_to_liquid`.

    Returns
    -------
    tuple of (str, str)
        The markup without style blocks, and the combined stylesheet.

    Examples
    --------
    >>> extract_styles('<style>.a { color: red;}</style><p>x</p><style>.a { color: red;}</style>')
    ('<p>x</p>', '.a { color: red;}')
    """
    style_bodies = []

    def _collect(match):
        style_bodies.append(match.group(1))
        return ""

    stripped = STYLE_TAG_PATTERN.sub(_collect, html)
    return stripped, join_styles(style_bodies)


def join_styles(style_bodies: Iterable[str]) -> str:
    """
    De-duplicate and normalize CSS bodies into one stylesheet.

    Bodies are de-duplicated by exact text, keeping first-occurrence order,
    and joined with a single space. ``&gt;`` and ``&quot;`` are decoded,
    empty declarations (``prop: ;``) are dropped, whitespace runs are
    collapsed to one space and the result is trimmed.

    Parameters
    ----------
    style_bodies : Iterable[str]
        Raw CSS bodies in collection order.

    Returns
    -------
    str
        The normalized stylesheet; ``""`` when there is nothing to emit.

    Examples
    --------
    >>> join_styles([".a {\\n  color: red;}", ".a {\\n  color: red;}", ".b {}"])
    '.a { color: red;} .b {}'
    """
    css = " ".join(dict.fromkeys(style_bodies))
    css = css.replace("&gt;", ">").replace("&quot;", '"')
    css = EMPTY_DECLARATION_PATTERN.sub("", css)
    css = WHITESPACE_PATTERN.sub(" ", css)
    return css.strip()


def _wrap_container(document: Document, model_name: str, body: str) -> str:
    """
    Wrap serialized blocks in the content container.

    Parameters
    ----------
    document : Document
        Source of the content id.
    model_name : str
        Value of ``data-builder-component`` and ``builder-model``.
    body : str
        Serialized top-level blocks.

    Returns
    -------
    str
    """
    attributes = map_to_attributes(
        {
            "class": CONTENT_CLASS,
            "builder-content-id": document.id,
            "data-builder-content-id": document.id,
            "data-builder-component": model_name,
            "builder-model": model_name,
        }
    )
    return f"<div{attributes}>{body}</div>"


def _check_ids(document: Document, report_name: str, strict: bool = False):
    """
    Report element id collisions.

    Colliding ids make the style rules of one element apply to another.
    With `strict` the collision is an error, otherwise a warning is logged.

    Raises
    ------
    ValueError
        If `strict` is set and ids collide.
    """
    if strict:
        validate_unique_ids(document.blocks, err_msg=ERR_MSG_DUPLICATE_IDS_F)
        return
    duplicates = collect_duplicate_ids(document.blocks)
    if duplicates:
        logger.warning(WARN_MSG_DUPLICATE_IDS_F, report_name, duplicates)
