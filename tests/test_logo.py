"""Tests for the responsive logo component.

The logo renders both name variants and relies on a CSS media query to hide
one of them. These tests parse the rendered fragment with BeautifulSoup to
check the stable class names, and use the stylesheet evaluator to check the
computed ``display`` of each variant on either side of the tablet breakpoint.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from blog_pages.config import load_site_config
from blog_pages.logo import (
    FULL_NAME_SELECTOR,
    SHORT_NAME_SELECTOR,
    Logo,
    LogoBuilder,
)
from blog_pages.styles import BREAKPOINTS, is_hidden

if typ.TYPE_CHECKING:
    from pathlib import Path

TABLET = BREAKPOINTS["tablet"]


@pytest.fixture
def logo() -> Logo:
    """Return the logo configured like the published site."""
    return Logo("Janderson Constantino", "Janderson")


def test_fragment_contains_both_variants(logo: Logo) -> None:
    """Both variants are always present in the markup."""
    soup = BeautifulSoup(logo.render(), "html.parser")
    container = soup.select_one("div.Logo")
    assert container is not None, "expected a .Logo container"
    headings = container.find_all("h3")
    assert [h["class"] for h in headings] == [["Logo__Desktop"], ["Logo__Mobile"]]
    assert headings[0].get_text() == "Janderson Constantino"
    assert headings[1].get_text() == "Janderson"


def test_fragment_ships_breakpoint_stylesheet(logo: Logo) -> None:
    """The style block carries the media query rather than any script."""
    soup = BeautifulSoup(logo.render(), "html.parser")
    style = soup.find("style")
    assert style is not None
    css = style.get_text()
    assert f"@media (min-width: {TABLET}px)" in css
    assert ".Logo .Logo__Mobile {\n  display: none;\n}" in css
    assert soup.find("script") is None


def test_narrow_viewport_shows_full_name(logo: Logo) -> None:
    """Below the breakpoint the short name is hidden."""
    assert logo.visible_variants(500) == ["full"]
    assert is_hidden(logo.rules, SHORT_NAME_SELECTOR, 500)
    assert not is_hidden(logo.rules, FULL_NAME_SELECTOR, 500)


def test_wide_viewport_shows_short_name(logo: Logo) -> None:
    """At and above the breakpoint the full name is hidden."""
    assert logo.visible_variants(TABLET) == ["short"]
    assert logo.visible_variants(1024) == ["short"]
    assert is_hidden(logo.rules, FULL_NAME_SELECTOR, 1024)


def test_exactly_one_variant_visible_at_every_width(logo: Logo) -> None:
    """No width shows zero or both variants."""
    for width in range(0, 2001, 7):
        assert len(logo.visible_variants(width)) == 1, f"width {width}px"
    for width in (TABLET - 1, TABLET, TABLET + 1):
        assert len(logo.visible_variants(width)) == 1, f"width {width}px"


def test_fill_colors_the_container() -> None:
    """The fill option becomes the container text color."""
    logo = Logo("Full", "F", fill="#1a1a1a")
    assert ".Logo {\n  color: #1a1a1a;\n}" in logo.stylesheet


def test_invalid_fill_is_rejected() -> None:
    """Non-color fills raise ValueError."""
    with pytest.raises(ValueError, match="CSS color"):
        Logo("Full", "F", fill="url(javascript:alert(1))")


def test_names_are_escaped() -> None:
    """Names are HTML-escaped in the fragment."""
    html = Logo("<b>Full</b>", "F&co").render()
    assert "&lt;b&gt;Full&lt;/b&gt;" in html
    assert "F&amp;co" in html


def test_custom_breakpoint_moves_the_toggle() -> None:
    """Another named breakpoint shifts where the variants swap."""
    logo = Logo("Full", "F", breakpoint="desktop")
    assert logo.visible_variants(1024) == ["full"]
    assert logo.visible_variants(BREAKPOINTS["desktop"]) == ["short"]


def test_from_site_uses_first_word(repo_config_path: Path) -> None:
    """The short name defaults to the first word of the site name."""
    metadata = load_site_config(repo_config_path).site_metadata
    logo = Logo.from_site(metadata)
    assert logo.full_name == "Janderson Constantino"
    assert logo.short_name == "Janderson"
    assert Logo.from_site(metadata, short_name="JC").short_name == "JC"


def test_builder_writes_standalone_page(logo: Logo, tmp_path: Path) -> None:
    """The standalone page wraps the fragment with a title."""
    output = tmp_path / "public" / "logo.html"
    written = LogoBuilder(logo, output, standalone=True, title="Blog").run()
    assert written == output
    html = output.read_text(encoding="utf-8")
    assert html.endswith("\n")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.title is not None
    assert soup.title.get_text() == "Blog"
    assert soup.html is not None
    assert soup.html["lang"] == "pt-BR"
    assert soup.select_one("body div.Logo h3.Logo__Mobile") is not None


def test_builder_writes_fragment(logo: Logo, tmp_path: Path) -> None:
    """Without --standalone the file is the bare fragment."""
    output = tmp_path / "logo.html"
    LogoBuilder(logo, output).run()
    html = output.read_text(encoding="utf-8")
    assert html.startswith("<style>")
    assert "<html" not in html


def test_builder_sets_page_language(logo: Logo, tmp_path: Path) -> None:
    """The standalone page carries the requested ``lang`` attribute."""
    output = tmp_path / "logo.html"
    LogoBuilder(logo, output, standalone=True, lang="en").run()
    soup = BeautifulSoup(output.read_text(encoding="utf-8"), "html.parser")
    assert soup.html is not None
    assert soup.html["lang"] == "en"


def test_context_names_the_variant_classes(logo: Logo) -> None:
    """The shared template context exposes the stable class names."""
    context = logo.context()
    assert context["full_name_class"] == "Logo__Desktop"
    assert context["short_name_class"] == "Logo__Mobile"
    assert context["stylesheet"] == logo.stylesheet
