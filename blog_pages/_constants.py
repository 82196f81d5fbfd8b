"""Common literal values used across blog_pages.

Plugin identifiers, default file locations, and the manifest display modes live
here so the loader, exporters, CLI, and tests share one copy of each value.
Intended for internal use within the blog_pages package.

Examples
--------
>>> from blog_pages import _constants
>>> _constants.THEME_PLUGIN
'@narative/gatsby-theme-novela'
>>> "standalone" in _constants.MANIFEST_DISPLAY_MODES
True
"""

from pathlib import Path

THEME_PLUGIN = "@narative/gatsby-theme-novela"
MANIFEST_PLUGIN = "gatsby-plugin-manifest"

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_EXPORT_OUTPUT = Path("public/site-config.json")
DEFAULT_LOGO_OUTPUT = Path("public/logo.html")
DEFAULT_MANIFEST_OUTPUT = Path("public/manifest.webmanifest")

MANIFEST_DISPLAY_MODES = frozenset({"fullscreen", "standalone", "minimal-ui", "browser"})
