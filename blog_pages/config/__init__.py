"""Load and validate the blog's site configuration.

This subpackage parses the canonical ``config/site.yaml`` document, checks the
fields the hosting framework and its theme rely on (absolute ``siteUrl`` and
social URLs, a positive hero ``maxWidth``, complete manifest options), and
returns frozen dataclasses that downstream exporters and components consume.
The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.site_metadata.social[0].name  # doctest: +SKIP
'twitter'
"""

from .loader import build_site_config, load_site_config
from .models import (
    HeroConfig,
    ManifestPluginOptions,
    PluginConfig,
    SiteConfig,
    SiteConfigError,
    SiteMetadata,
    SocialLink,
    ThemePluginOptions,
)

__all__ = [
    "HeroConfig",
    "ManifestPluginOptions",
    "PluginConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetadata",
    "SocialLink",
    "ThemePluginOptions",
    "build_site_config",
    "load_site_config",
]
