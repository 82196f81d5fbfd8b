"""Tests for the framework configuration export."""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json

from blog_pages.config import load_site_config
from blog_pages.export import export_framework_config, write_framework_config

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_export_uses_framework_field_names(sample_config_path: Path) -> None:
    """siteMetadata keys and nesting match what the framework reads."""
    exported = export_framework_config(load_site_config(sample_config_path))
    assert list(exported) == ["siteMetadata", "plugins"]
    metadata = exported["siteMetadata"]
    assert metadata["title"] == "Example Blog"
    assert metadata["siteUrl"] == "https://example.com"
    assert metadata["hero"] == {"heading": "Writing about examples.", "maxWidth": 652}
    assert metadata["social"][0]["url"] == "https://twitter.com/example"


def test_export_keeps_plugin_options_as_authored(sample_config_path: Path) -> None:
    """Plugin order and options are copied verbatim, defaults are not injected."""
    plugins = export_framework_config(load_site_config(sample_config_path))["plugins"]
    assert [plugin["resolve"] for plugin in plugins] == [
        "@narative/gatsby-theme-novela",
        "gatsby-plugin-manifest",
    ]
    assert plugins[0]["options"] == {
        "contentPosts": "content/posts",
        "basePath": "/",
        "authorsPage": True,
        "sources": {"local": True},
    }
    assert isinstance(plugins[0]["options"]["sources"], dict)


def test_write_framework_config_round_trips(
    repo_config_path: Path, tmp_path: Path
) -> None:
    """The written JSON decodes back to the exported object."""
    config = load_site_config(repo_config_path)
    output = tmp_path / "public" / "site-config.json"
    written = write_framework_config(config, output)
    assert written == output
    text = output.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert msgspec_json.decode(text.encode("utf-8")) == export_framework_config(config)
    assert "Blog pessoal sobre tecnologia." in text
