"""Builders for the ``plugins`` section and the typed plugin option views."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from blog_pages._constants import MANIFEST_DISPLAY_MODES
from blog_pages.styles.colors import is_css_color

from .helpers import (
    _freeze,
    _optional_bool,
    _optional_str,
    _require_mapping,
    _require_str,
)
from .models import (
    ManifestPluginOptions,
    PluginConfig,
    SiteConfigError,
    ThemePluginOptions,
)

_MANIFEST_TEXT_FIELDS = ("name", "short_name", "start_url", "icon")
_MANIFEST_COLOR_FIELDS = ("background_color", "theme_color")


def _build_plugins(entries: object) -> tuple[PluginConfig, ...]:
    """Build the ordered plugin list; a bare string is a plugin with no options."""
    match entries:
        case None:
            return ()
        case str() | cabc.Mapping():
            msg = "plugins must be a list."
            raise SiteConfigError(msg)
        case cabc.Sequence() as items:
            pass
        case _:
            msg = "plugins must be a list."
            raise SiteConfigError(msg)

    plugins: list[PluginConfig] = []
    for index, entry in enumerate(items):
        field = f"plugins[{index}]"
        match entry:
            case str() as resolve if resolve.strip():
                plugins.append(PluginConfig(resolve=resolve))
                continue
            case cabc.Mapping() as data:
                resolve = _require_str(data, "resolve", f"{field}.resolve")
                options = data.get("options")
                if options is None:
                    options = {}
                options = _require_mapping(options, f"{field}.options")
                plugins.append(PluginConfig(resolve=resolve, options=_freeze(options)))
            case _:
                msg = f"{field} must be a plugin name or a mapping with 'resolve'."
                raise SiteConfigError(msg)
    return tuple(plugins)


def _build_theme_options(
    options: cabc.Mapping[str, typ.Any], field: str
) -> ThemePluginOptions:
    """Resolve theme options, falling back to the theme's defaults."""
    base = ThemePluginOptions()
    sources = options.get("sources")
    if sources is None:
        sources = {}
    sources = _require_mapping(sources, f"{field}.sources")
    return ThemePluginOptions(
        content_posts=_optional_str(
            options, "contentPosts", f"{field}.contentPosts", default=base.content_posts
        ),
        content_authors=_optional_str(
            options,
            "contentAuthors",
            f"{field}.contentAuthors",
            default=base.content_authors,
        ),
        base_path=_optional_str(
            options, "basePath", f"{field}.basePath", default=base.base_path
        ),
        authors_page=_optional_bool(
            options, "authorsPage", f"{field}.authorsPage", default=base.authors_page
        ),
        sources_local=_optional_bool(
            sources, "local", f"{field}.sources.local", default=base.sources_local
        ),
    )


def _build_manifest_options(
    options: cabc.Mapping[str, typ.Any], field: str
) -> ManifestPluginOptions:
    """Resolve manifest options; every field is required."""
    values: dict[str, str] = {}
    for key in _MANIFEST_TEXT_FIELDS:
        values[key] = _require_str(options, key, f"{field}.{key}")
    for key in _MANIFEST_COLOR_FIELDS:
        color = _require_str(options, key, f"{field}.{key}")
        if not is_css_color(color):
            msg = f"{field}.{key} must be a CSS color, got {color!r}"
            raise SiteConfigError(msg)
        values[key] = color
    display = _require_str(options, "display", f"{field}.display")
    if display not in MANIFEST_DISPLAY_MODES:
        allowed = ", ".join(sorted(MANIFEST_DISPLAY_MODES))
        msg = f"{field}.display must be one of {allowed}, got {display!r}"
        raise SiteConfigError(msg)
    return ManifestPluginOptions(display=display, **values)


__all__ = ["_build_manifest_options", "_build_plugins", "_build_theme_options"]
