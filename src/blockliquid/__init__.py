"""
blockliquid: a compiler from block trees to static markup.

Features include:
- Recursive serialization of block trees into HTML
- Responsive styles compiled into breakpoint-scoped CSS
- Inline or extracted stylesheets for store-front templates
- Email-safe style emission
- Embed tags for client-side renderers
"""
import logging

from .types import Breakpoint, Document, Element
from .sizes import BREAKPOINTS, breakpoint_for_width, width_for_breakpoint
from .compiler import (
    block_to_liquid,
    extract_styles,
    model_to_liquid,
    render_component_element,
)

__version__ = "0.1.0"

__all__ = [
    "Breakpoint",
    "Document",
    "Element",
    "BREAKPOINTS",
    "breakpoint_for_width",
    "width_for_breakpoint",
    "block_to_liquid",
    "extract_styles",
    "model_to_liquid",
    "render_component_element",
]

logger = logging.getLogger("blockliquid")
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)
