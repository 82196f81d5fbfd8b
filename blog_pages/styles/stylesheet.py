"""Declarative style rules, their CSS rendering, and a small cascade evaluator.

Components describe their presentation as an ordered tuple of
:class:`StyleRule` values. :func:`render_css` turns those rules into the
stylesheet shipped with the markup, and :func:`computed_value` answers which
declaration wins for a selector at a given viewport width. The evaluator
assumes every selector carries the same specificity, so later rules override
earlier ones, which holds for the component stylesheets built here.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .media import MediaQuery

INITIAL_DISPLAY = "block"


@dc.dataclass(frozen=True, slots=True)
class StyleRule:
    """A selector, its declarations, and an optional media condition."""

    selector: str
    declarations: tuple[tuple[str, str], ...]
    media: MediaQuery | None = None

    def applies_at(self, width: int) -> bool:
        """Return ``True`` when the rule is active for viewport ``width``."""
        return self.media is None or self.media.matches(width)

    def block(self, indent: str = "") -> str:
        """Render ``selector { ... }`` with one declaration per line."""
        lines = [f"{indent}{self.selector} {{"]
        lines.extend(
            f"{indent}  {prop}: {value};" for prop, value in self.declarations
        )
        lines.append(f"{indent}}}")
        return "\n".join(lines)


def render_css(rules: cabc.Iterable[StyleRule]) -> str:
    """Render ``rules`` to CSS, grouping consecutive rules sharing a media query."""
    chunks: list[str] = []
    pending: list[StyleRule] = []
    current: MediaQuery | None = None

    def _flush() -> None:
        if not pending:
            return
        if current is None:
            chunks.extend(rule.block() for rule in pending)
        else:
            body = "\n".join(rule.block("  ") for rule in pending)
            chunks.append(f"{current} {{\n{body}\n}}")
        pending.clear()

    for rule in rules:
        if pending and rule.media != current:
            _flush()
        current = rule.media
        pending.append(rule)
    _flush()
    return "\n".join(chunks) + ("\n" if chunks else "")


def computed_value(
    rules: cabc.Iterable[StyleRule],
    selector: str,
    prop: str,
    width: int,
    *,
    default: str | None = None,
) -> str | None:
    """Return the winning value of ``prop`` for ``selector`` at ``width``."""
    value = default
    for rule in rules:
        if rule.selector != selector or not rule.applies_at(width):
            continue
        for name, declared in rule.declarations:
            if name == prop:
                value = declared
    return value


def computed_display(
    rules: cabc.Iterable[StyleRule], selector: str, width: int
) -> str:
    """Return the computed ``display`` of ``selector`` at viewport ``width``."""
    value = computed_value(rules, selector, "display", width, default=INITIAL_DISPLAY)
    return value or INITIAL_DISPLAY


def is_hidden(rules: cabc.Iterable[StyleRule], selector: str, width: int) -> bool:
    """Return ``True`` when ``selector`` computes to ``display: none``."""
    return computed_display(rules, selector, width) == "none"


__all__ = [
    "INITIAL_DISPLAY",
    "StyleRule",
    "computed_display",
    "computed_value",
    "is_hidden",
    "render_css",
]
