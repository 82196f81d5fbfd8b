"""Named viewport breakpoints and the media queries built from them.

The widths mirror the theme's ``mediaqueries`` helpers so overrides written
here line up with the layout shipped by the theme package.

Examples
--------
>>> from blog_pages.styles.media import media_query
>>> str(media_query("tablet"))
'@media (min-width: 735px)'
>>> str(media_query("tablet", direction="down"))
'@media (max-width: 735px)'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

BREAKPOINTS: dict[str, int] = {
    "phone_small": 320,
    "phone": 376,
    "phablet": 540,
    "tablet": 735,
    "desktop": 1070,
    "desktop_medium": 1280,
    "desktop_large": 1440,
}

Direction = typ.Literal["up", "down"]


@dc.dataclass(frozen=True, slots=True)
class MediaQuery:
    """A width-bounded ``@media`` condition; both bounds are inclusive."""

    min_width: int | None = None
    max_width: int | None = None

    def matches(self, width: int) -> bool:
        """Return ``True`` when a viewport ``width`` satisfies the query."""
        if self.min_width is not None and width < self.min_width:
            return False
        return not (self.max_width is not None and width > self.max_width)

    def __str__(self) -> str:
        features: list[str] = []
        if self.min_width is not None:
            features.append(f"(min-width: {self.min_width}px)")
        if self.max_width is not None:
            features.append(f"(max-width: {self.max_width}px)")
        if not features:
            return "@media all"
        return "@media " + " and ".join(features)


def breakpoint_width(name: str) -> int:
    """Return the pixel width registered for breakpoint ``name``."""
    try:
        return BREAKPOINTS[name]
    except KeyError as exc:
        available = ", ".join(BREAKPOINTS)
        msg = f"Unknown breakpoint '{name}'. Known breakpoints: {available}"
        raise ValueError(msg) from exc


def media_query(name: str, *, direction: Direction = "up") -> MediaQuery:
    """Build the media query for breakpoint ``name``.

    Parameters
    ----------
    name : str
        Breakpoint key from :data:`BREAKPOINTS`.
    direction : {"up", "down"}, optional
        ``"up"`` matches viewports at or above the breakpoint, ``"down"``
        matches viewports at or below it (the theme's own convention).

    Raises
    ------
    ValueError
        If ``name`` or ``direction`` is not recognised.
    """
    width = breakpoint_width(name)
    match direction:
        case "up":
            return MediaQuery(min_width=width)
        case "down":
            return MediaQuery(max_width=width)
        case _:
            msg = f"Unknown media query direction '{direction}'."
            raise ValueError(msg)


__all__ = ["BREAKPOINTS", "MediaQuery", "breakpoint_width", "media_query"]
