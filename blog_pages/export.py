"""Serialise the loaded site configuration into the framework's object shape.

The hosting framework reads a single object with ``siteMetadata`` and
``plugins`` keys. :func:`export_framework_config` rebuilds that object from a
validated :class:`~blog_pages.config.SiteConfig`, restoring the framework's
field names (``siteUrl``, ``hero.maxWidth``) and keeping plugin order and
options exactly as authored.

Example
-------
>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> from blog_pages.export import export_framework_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> export_framework_config(site)["siteMetadata"]["hero"]  # doctest: +SKIP
{'heading': 'Blog pessoal sobre tecnologia.', 'maxWidth': 900}
"""

from __future__ import annotations

import json
import typing as typ

from .config.helpers import _thaw

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig, SiteMetadata


def export_framework_config(config: SiteConfig) -> dict[str, typ.Any]:
    """Return the plain-data configuration object the framework consumes."""
    return {
        "siteMetadata": _export_site_metadata(config.site_metadata),
        "plugins": [
            {"resolve": plugin.resolve, "options": _thaw(plugin.options)}
            for plugin in config.plugins
        ],
    }


def write_framework_config(config: SiteConfig, output: Path) -> Path:
    """Write :func:`export_framework_config` as UTF-8 JSON to ``output``."""
    output.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(export_framework_config(config), indent=2, ensure_ascii=False)
    output.write_text(payload + "\n", encoding="utf-8")
    return output


def _export_site_metadata(metadata: SiteMetadata) -> dict[str, typ.Any]:
    return {
        "title": metadata.title,
        "name": metadata.name,
        "siteUrl": metadata.site_url,
        "description": metadata.description,
        "hero": {
            "heading": metadata.hero.heading,
            "maxWidth": metadata.hero.max_width,
        },
        "social": [{"name": link.name, "url": link.url} for link in metadata.social],
    }


__all__ = ["export_framework_config", "write_framework_config"]
