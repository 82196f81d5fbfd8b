"""Web app manifest generation from the manifest plugin options."""

from __future__ import annotations

import json
import mimetypes
import typing as typ
from pathlib import PurePosixPath

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import ManifestPluginOptions


def build_web_manifest(options: ManifestPluginOptions) -> dict[str, typ.Any]:
    """Return the ``manifest.webmanifest`` document for ``options``.

    The configured icon is referenced once, by file name, from the site root;
    publishing the image itself is left to the site's static asset handling.
    """
    icon_name = PurePosixPath(options.icon.replace("\\", "/")).name
    icon: dict[str, str] = {"src": f"/{icon_name}"}
    icon_type, _encoding = mimetypes.guess_type(icon_name)
    if icon_type:
        icon["type"] = icon_type
    return {
        "name": options.name,
        "short_name": options.short_name,
        "start_url": options.start_url,
        "background_color": options.background_color,
        "theme_color": options.theme_color,
        "display": options.display,
        "icons": [icon],
    }


class ManifestBuilder:
    """Render and persist the web app manifest."""

    def __init__(self, options: ManifestPluginOptions, output: Path) -> None:
        self.options = options
        self.output = output

    def run(self) -> Path:
        """Write the manifest JSON, returning the output path."""
        self.output.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(
            build_web_manifest(self.options), indent=2, ensure_ascii=False
        )
        self.output.write_text(payload + "\n", encoding="utf-8")
        return self.output


__all__ = ["ManifestBuilder", "build_web_manifest"]
