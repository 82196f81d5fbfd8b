"""Builders for the ``siteMetadata`` section."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .helpers import (
    _require_absolute_url,
    _require_mapping,
    _require_positive_int,
    _require_str,
)
from .models import HeroConfig, SiteConfigError, SiteMetadata, SocialLink

_PREFIX = "siteMetadata"


def _build_site_metadata(payload: object) -> SiteMetadata:
    """Build :class:`SiteMetadata` from the raw ``siteMetadata`` mapping."""
    data = _require_mapping(payload, _PREFIX)
    site_url = _require_str(data, "siteUrl", f"{_PREFIX}.siteUrl")
    return SiteMetadata(
        title=_require_str(data, "title", f"{_PREFIX}.title"),
        name=_require_str(data, "name", f"{_PREFIX}.name"),
        site_url=_require_absolute_url(site_url, f"{_PREFIX}.siteUrl"),
        description=_require_str(data, "description", f"{_PREFIX}.description"),
        hero=_build_hero_config(data.get("hero")),
        social=_build_social_links(data.get("social")),
    )


def _build_hero_config(payload: object) -> HeroConfig:
    """Build the hero block, requiring a heading and a positive ``maxWidth``."""
    data = _require_mapping(payload, f"{_PREFIX}.hero")
    return HeroConfig(
        heading=_require_str(data, "heading", f"{_PREFIX}.hero.heading"),
        max_width=_require_positive_int(
            data.get("maxWidth"), f"{_PREFIX}.hero.maxWidth"
        ),
    )


def _build_social_links(entries: object) -> tuple[SocialLink, ...]:
    """Build social links in declaration order."""
    field = f"{_PREFIX}.social"
    match entries:
        case None:
            msg = f"{field} is required."
            raise SiteConfigError(msg)
        case str() | cabc.Mapping():
            msg = f"{field} must be a list of links."
            raise SiteConfigError(msg)
        case cabc.Sequence() as items:
            pass
        case _:
            msg = f"{field} must be a list of links."
            raise SiteConfigError(msg)

    links: list[SocialLink] = []
    for index, entry in enumerate(items):
        entry_field = f"{field}[{index}]"
        data: cabc.Mapping[str, typ.Any] = _require_mapping(entry, entry_field)
        url = _require_str(data, "url", f"{entry_field}.url")
        links.append(
            SocialLink(
                name=_require_str(data, "name", f"{entry_field}.name"),
                url=_require_absolute_url(url, f"{entry_field}.url"),
            )
        )
    return tuple(links)


__all__ = ["_build_hero_config", "_build_site_metadata", "_build_social_links"]
