"""Tests for web app manifest generation."""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json

from blog_pages.config import ManifestPluginOptions, load_site_config
from blog_pages.manifest import ManifestBuilder, build_web_manifest

if typ.TYPE_CHECKING:
    from pathlib import Path


def _options(**overrides: str) -> ManifestPluginOptions:
    values = {
        "name": "Novela by Narative",
        "short_name": "Novela",
        "start_url": "/",
        "background_color": "#fff",
        "theme_color": "#fff",
        "display": "standalone",
        "icon": "src/assets/favicon.png",
    }
    values.update(overrides)
    return ManifestPluginOptions(**values)


def test_manifest_copies_plugin_options() -> None:
    """Every manifest option is carried into the document."""
    manifest = build_web_manifest(_options())
    assert manifest == {
        "name": "Novela by Narative",
        "short_name": "Novela",
        "start_url": "/",
        "background_color": "#fff",
        "theme_color": "#fff",
        "display": "standalone",
        "icons": [{"src": "/favicon.png", "type": "image/png"}],
    }


def test_manifest_icon_without_known_type() -> None:
    """Icons with unknown extensions omit the type field."""
    manifest = build_web_manifest(_options(icon="assets/icon.unknownext"))
    assert manifest["icons"] == [{"src": "/icon.unknownext"}]


def test_builder_writes_manifest(repo_config_path: Path, tmp_path: Path) -> None:
    """The builder writes JSON derived from the configured manifest plugin."""
    options = load_site_config(repo_config_path).manifest
    assert options is not None
    output = tmp_path / "public" / "manifest.webmanifest"
    ManifestBuilder(options, output).run()
    decoded = msgspec_json.decode(output.read_bytes())
    assert decoded["short_name"] == "Novela"
    assert decoded["display"] == "standalone"
