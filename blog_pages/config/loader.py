"""Load the site configuration YAML into typed dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ruamel.yaml import YAML

from blog_pages._constants import MANIFEST_PLUGIN, THEME_PLUGIN

from .metadata import _build_site_metadata
from .models import SiteConfig, SiteConfigError
from .plugins import _build_manifest_options, _build_plugins, _build_theme_options

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path) -> SiteConfig:
    """Load and validate the site configuration document.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Immutable configuration holding the site metadata, the ordered plugin
        list, and typed views over the theme and manifest plugin options.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the document is not a mapping, or a required field is missing or
        malformed. The message names the offending field, for example
        ``siteMetadata.social[1].url``.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from blog_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.site_metadata.hero.max_width  # doctest: +SKIP
    900
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    return build_site_config(loaded)


def build_site_config(raw: cabc.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a :class:`SiteConfig` from an already parsed mapping."""
    metadata = _build_site_metadata(raw.get("siteMetadata"))
    plugins = _build_plugins(raw.get("plugins"))

    theme = None
    manifest = None
    for index, plugin in enumerate(plugins):
        field = f"plugins[{index}].options"
        if plugin.resolve == THEME_PLUGIN and theme is None:
            theme = _build_theme_options(plugin.options, field)
        elif plugin.resolve == MANIFEST_PLUGIN and manifest is None:
            manifest = _build_manifest_options(plugin.options, field)

    return SiteConfig(
        site_metadata=metadata,
        plugins=plugins,
        theme=theme,
        manifest=manifest,
    )


__all__ = ["build_site_config", "load_site_config"]
