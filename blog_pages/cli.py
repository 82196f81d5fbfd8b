"""Cyclopts CLI entrypoint for validating and exporting the blog site configuration.

The ``blog`` console script defined here checks ``config/site.yaml``, writes the
framework-shaped configuration as JSON, renders the responsive logo fragment,
and produces the web app manifest. Every option can also be supplied through
``INPUT_*`` environment variables so CI steps can drive it without flags.

Examples
--------
Validate the default configuration:

>>> from blog_pages.cli import main
>>> main()  # doctest: +SKIP

Render a standalone logo preview into a custom location:

>>> from blog_pages.cli import app
>>> app(["logo", "--output", "dist/logo.html", "--standalone"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import (
    DEFAULT_CONFIG,
    DEFAULT_EXPORT_OUTPUT,
    DEFAULT_LOGO_OUTPUT,
    DEFAULT_MANIFEST_OUTPUT,
)
from .config import SiteConfigError, load_site_config
from .export import write_framework_config
from .logo import DEFAULT_BREAKPOINT, DEFAULT_FILL, DEFAULT_LANG, Logo, LogoBuilder
from .manifest import ManifestBuilder

app = App(name="blog", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Validate the site configuration and summarise it.")
def check(*, config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Load ``config`` and print the values the framework will receive.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).

    Raises
    ------
    SiteConfigError
        If a required field is missing or malformed; the message names the
        field.
    """
    site_config = load_site_config(config)
    metadata = site_config.site_metadata
    print(f"title: {metadata.title}")
    print(f"siteUrl: {metadata.site_url}")
    print(f"social links: {len(metadata.social)}")
    plugins = ", ".join(plugin.resolve for plugin in site_config.plugins) or "none"
    print(f"plugins: {plugins}")


@app.command(help="Write the framework configuration object as JSON.")
def export(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the JSON", env_var="INPUT_OUTPUT")
    ] = DEFAULT_EXPORT_OUTPUT,
) -> None:
    """Export the validated configuration with the framework's field names."""
    site_config = load_site_config(config)
    written = write_framework_config(site_config, output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Render the responsive logo fragment.")
def logo(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the HTML", env_var="INPUT_OUTPUT")
    ] = DEFAULT_LOGO_OUTPUT,
    fill: typ.Annotated[
        str, Parameter(help="CSS color for the logo text", env_var="INPUT_FILL")
    ] = DEFAULT_FILL,
    short_name: typ.Annotated[
        str | None,
        Parameter(
            help="Text shown at and above the breakpoint", env_var="INPUT_SHORT_NAME"
        ),
    ] = None,
    breakpoint: typ.Annotated[
        str,
        Parameter(help="Breakpoint that flips the variants", env_var="INPUT_BREAKPOINT"),
    ] = DEFAULT_BREAKPOINT,
    lang: typ.Annotated[
        str, Parameter(help="Language of the preview page", env_var="INPUT_LANG")
    ] = DEFAULT_LANG,
    standalone: typ.Annotated[
        bool, Parameter(help="Wrap the fragment in a preview page")
    ] = False,
) -> None:
    """Render the logo for the configured site name.

    Parameters
    ----------
    config : Path, optional
        Path to the site configuration; the logo uses ``siteMetadata.name``.
    output : Path, optional
        Destination HTML file, ``public/logo.html`` by default.
    fill : str, optional
        CSS color for the logo text.
    short_name : str or None, optional
        Short variant text; defaults to the first word of the site name.
    breakpoint : str, optional
        Breakpoint name at which the short variant takes over.
    lang : str, optional
        ``lang`` attribute of the standalone page, ``pt-BR`` by default.
    standalone : bool, optional
        Emit a full HTML document titled with ``siteMetadata.title``.
    """
    site_config = load_site_config(config)
    metadata = site_config.site_metadata
    component = Logo.from_site(
        metadata, short_name=short_name, fill=fill, breakpoint=breakpoint
    )
    builder = LogoBuilder(
        component, output, standalone=standalone, title=metadata.title, lang=lang
    )
    print(f"wrote {_format_path(builder.run())}")


@app.command(help="Write the web app manifest from the manifest plugin options.")
def manifest(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the manifest", env_var="INPUT_OUTPUT")
    ] = DEFAULT_MANIFEST_OUTPUT,
) -> None:
    """Generate ``manifest.webmanifest`` from the configured manifest plugin.

    Raises
    ------
    SiteConfigError
        If no manifest plugin is configured.
    """
    site_config = load_site_config(config)
    if site_config.manifest is None:
        msg = "No 'gatsby-plugin-manifest' entry in plugins."
        raise SiteConfigError(msg)
    written = ManifestBuilder(site_config.manifest, output).run()
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``blog`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
