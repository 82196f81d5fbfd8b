"""Typed dataclasses describing the blog site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from types import MappingProxyType


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


def _empty_options() -> typ.Mapping[str, typ.Any]:
    return MappingProxyType({})


@dc.dataclass(frozen=True, slots=True)
class HeroConfig:
    """Homepage hero copy and its maximum width in pixels."""

    heading: str
    max_width: int


@dc.dataclass(frozen=True, slots=True)
class SocialLink:
    """Named external profile link, rendered in declaration order."""

    name: str
    url: str


@dc.dataclass(frozen=True, slots=True)
class SiteMetadata:
    """Site-wide metadata published to every page."""

    title: str
    name: str
    site_url: str
    description: str
    hero: HeroConfig
    social: tuple[SocialLink, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class PluginConfig:
    """A build-time plugin and its options, exactly as authored."""

    resolve: str
    # Read-only mapping views are unhashable; equality still compares them.
    options: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=_empty_options, hash=False
    )


@dc.dataclass(frozen=True, slots=True)
class ThemePluginOptions:
    """Resolved options for the blog theme plugin."""

    content_posts: str = "content/posts"
    content_authors: str = "content/authors"
    base_path: str = "/"
    authors_page: bool = False
    sources_local: bool = True


@dc.dataclass(frozen=True, slots=True)
class ManifestPluginOptions:
    """Resolved options for the web app manifest plugin."""

    name: str
    short_name: str
    start_url: str
    background_color: str
    theme_color: str
    display: str
    icon: str


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """The loaded site configuration: metadata plus ordered plugins."""

    site_metadata: SiteMetadata
    plugins: tuple[PluginConfig, ...] = ()
    theme: ThemePluginOptions | None = None
    manifest: ManifestPluginOptions | None = None

    def get_plugin(self, resolve: str) -> PluginConfig:
        """Return the first plugin registered under ``resolve``."""
        for plugin in self.plugins:
            if plugin.resolve == resolve:
                return plugin
        available = ", ".join(plugin.resolve for plugin in self.plugins) or "none"
        msg = f"Unknown plugin '{resolve}'. Configured plugins: {available}"
        raise KeyError(msg)


__all__ = [
    "HeroConfig",
    "ManifestPluginOptions",
    "PluginConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetadata",
    "SocialLink",
    "ThemePluginOptions",
]
