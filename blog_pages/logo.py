"""Responsive brand logo rendered as HTML plus a breakpoint-bound stylesheet.

The logo always emits both the full name and the short name. Which one the
reader sees is decided by CSS alone: the short name is hidden by default and,
at or above the configured breakpoint, the full name is hidden and the short
name is shown. Nothing measures the viewport at render time, so the markup is
identical for every device and never flashes between variants.

Typical usage renders the fragment straight from the site configuration:

>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> from blog_pages.logo import Logo
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> html = Logo.from_site(site.site_metadata).render()  # doctest: +SKIP

:class:`LogoBuilder` persists the fragment, or a standalone preview page, with
the same Jinja environment settings the other page builders use.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .styles import StyleRule, is_css_color, is_hidden, media_query, render_css

if typ.TYPE_CHECKING:
    from .config import SiteMetadata

DEFAULT_FILL = "#fff"
DEFAULT_BREAKPOINT = "tablet"
DEFAULT_LANG = "pt-BR"

CONTAINER_CLASS = "Logo"
FULL_NAME_CLASS = "Logo__Desktop"
SHORT_NAME_CLASS = "Logo__Mobile"
FULL_NAME_SELECTOR = f".{CONTAINER_CLASS} .{FULL_NAME_CLASS}"
SHORT_NAME_SELECTOR = f".{CONTAINER_CLASS} .{SHORT_NAME_CLASS}"

Variant = typ.Literal["full", "short"]


def _build_environment(templates_dir: Path | None) -> Environment:
    """Return the Jinja environment used by the logo templates."""
    return Environment(
        loader=FileSystemLoader(
            str(templates_dir or Path(__file__).parent / "templates")
        ),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


class Logo:
    """Two-variant brand mark toggled by a CSS media query."""

    def __init__(
        self,
        full_name: str,
        short_name: str,
        *,
        fill: str = DEFAULT_FILL,
        breakpoint: str = DEFAULT_BREAKPOINT,
    ) -> None:
        """Validate inputs and build the component stylesheet.

        Parameters
        ----------
        full_name : str
            Text shown below the breakpoint.
        short_name : str
            Text shown at or above the breakpoint.
        fill : str, optional
            CSS color applied to the logo text. Defaults to ``"#fff"``.
        breakpoint : str, optional
            Breakpoint name from :data:`blog_pages.styles.BREAKPOINTS` that
            flips the variants. Defaults to ``"tablet"``.

        Raises
        ------
        ValueError
            If a name is blank, ``fill`` is not a CSS color, or the breakpoint
            name is unknown.
        """
        if not full_name.strip() or not short_name.strip():
            msg = "Logo requires non-empty full and short names."
            raise ValueError(msg)
        if not is_css_color(fill):
            msg = f"Logo fill must be a CSS color, got {fill!r}"
            raise ValueError(msg)
        self.full_name = full_name
        self.short_name = short_name
        self.fill = fill.strip()
        self.breakpoint = breakpoint
        self.media = media_query(breakpoint)
        self.rules: tuple[StyleRule, ...] = (
            StyleRule(f".{CONTAINER_CLASS}", (("color", self.fill),)),
            StyleRule(SHORT_NAME_SELECTOR, (("display", "none"),)),
            StyleRule(FULL_NAME_SELECTOR, (("display", "none"),), self.media),
            StyleRule(SHORT_NAME_SELECTOR, (("display", "block"),), self.media),
        )

    @classmethod
    def from_site(
        cls,
        metadata: SiteMetadata,
        *,
        short_name: str | None = None,
        fill: str = DEFAULT_FILL,
        breakpoint: str = DEFAULT_BREAKPOINT,
    ) -> Logo:
        """Build a logo from site metadata; the short name defaults to the first word."""
        return cls(
            metadata.name,
            short_name or metadata.name.split()[0],
            fill=fill,
            breakpoint=breakpoint,
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS emitted alongside the markup."""
        return render_css(self.rules)

    def visible_variants(self, width: int) -> list[Variant]:
        """Return the variants whose computed ``display`` is not ``none`` at ``width``."""
        visible: list[Variant] = []
        if not is_hidden(self.rules, FULL_NAME_SELECTOR, width):
            visible.append("full")
        if not is_hidden(self.rules, SHORT_NAME_SELECTOR, width):
            visible.append("short")
        return visible

    def render(self, *, templates_dir: Path | None = None) -> str:
        """Render the ``<style>`` block and logo container as an HTML fragment."""
        template = _build_environment(templates_dir).get_template("logo.jinja")
        return template.render(**self.context())

    def context(self) -> dict[str, typ.Any]:
        """Return the template variables shared by the fragment and preview page."""
        return {
            "logo": self,
            "stylesheet": self.stylesheet,
            "container_class": CONTAINER_CLASS,
            "full_name_class": FULL_NAME_CLASS,
            "short_name_class": SHORT_NAME_CLASS,
        }


class LogoBuilder:
    """Write the logo fragment, or a standalone preview page, to disk."""

    def __init__(
        self,
        logo: Logo,
        output: Path,
        *,
        standalone: bool = False,
        title: str | None = None,
        lang: str = DEFAULT_LANG,
        templates_dir: Path | None = None,
    ) -> None:
        self.logo = logo
        self.output = output
        self.standalone = standalone
        self.title = title or logo.full_name
        self.lang = lang
        self.env = _build_environment(templates_dir)
        name = "logo_page.jinja" if standalone else "logo.jinja"
        self.template = self.env.get_template(name)

    def run(self) -> Path:
        """Render and write the logo HTML, returning the output path."""
        self.output.parent.mkdir(parents=True, exist_ok=True)
        context = self.logo.context()
        context.update(
            {
                "title": self.title,
                "lang": self.lang,
                "generated_at": dt.datetime.now(dt.UTC),
            }
        )
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        self.output.write_text(html, encoding="utf-8")
        return self.output


__all__ = [
    "DEFAULT_BREAKPOINT",
    "DEFAULT_FILL",
    "DEFAULT_LANG",
    "FULL_NAME_CLASS",
    "FULL_NAME_SELECTOR",
    "SHORT_NAME_CLASS",
    "SHORT_NAME_SELECTOR",
    "Logo",
    "LogoBuilder",
]
