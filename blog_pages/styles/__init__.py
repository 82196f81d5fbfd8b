"""Breakpoints, color checks, and declarative stylesheets for site components."""

from .colors import is_css_color
from .media import BREAKPOINTS, MediaQuery, breakpoint_width, media_query
from .stylesheet import (
    StyleRule,
    computed_display,
    computed_value,
    is_hidden,
    render_css,
)

__all__ = [
    "BREAKPOINTS",
    "MediaQuery",
    "StyleRule",
    "breakpoint_width",
    "computed_display",
    "computed_value",
    "is_css_color",
    "is_hidden",
    "media_query",
    "render_css",
]
