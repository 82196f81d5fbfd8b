"""Site configuration and responsive logo for the Janderson Constantino blog.

This package loads the canonical ``config/site.yaml``, validates it, exports it
in the shape the hosting framework reads, and renders the brand logo whose
full and short variants are toggled purely by a CSS breakpoint.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from blog_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
