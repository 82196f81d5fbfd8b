"""Shared fixtures for the blog_pages test suite."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]

SAMPLE_CONFIG = dedent(
    """
    siteMetadata:
      title: Example Blog
      name: Example Person
      siteUrl: https://example.com
      description: Notes about examples.
      hero:
        heading: Writing about examples.
        maxWidth: 652
      social:
        - name: twitter
          url: https://twitter.com/example
        - name: github
          url: https://github.com/example
    plugins:
      - resolve: "@narative/gatsby-theme-novela"
        options:
          contentPosts: content/posts
          basePath: /
          authorsPage: true
          sources:
            local: true
      - resolve: gatsby-plugin-manifest
        options:
          name: Example
          short_name: Ex
          start_url: /
          background_color: "#fff"
          theme_color: "#000000"
          display: standalone
          icon: src/assets/favicon.png
    """
).lstrip()


@pytest.fixture
def sample_config_text() -> str:
    """Return a valid configuration document used across tests."""
    return SAMPLE_CONFIG


@pytest.fixture
def sample_config_path(tmp_path: Path, sample_config_text: str) -> Path:
    """Write the sample configuration to a temp file and return its path."""
    path = tmp_path / "site.yaml"
    path.write_text(sample_config_text, encoding="utf-8")
    return path


@pytest.fixture
def repo_config_path() -> Path:
    """Return the path to the checked-in canonical configuration."""
    return REPO_ROOT / "config" / "site.yaml"
