"""Formatting configuration shared read-only by every renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Formatting knobs for one render pass.

    A config whose braces are both empty renders declarations only; selector
    text is never produced in that mode.
    """

    indentation: str = ""
    newline: str = ""
    separator: str = ""
    lbrace: str = "{"
    rbrace: str = "}"
    final_semicolon: bool = False
    warn: bool = False
    align: bool = False
    banner: bool = False
    comments: bool = False

    @property
    def is_inline(self) -> bool:
        """True when the braces are empty (style-attribute output)."""
        return self.lbrace == "" and self.rbrace == ""


PRETTY = RenderConfig(
    indentation="  ",
    newline="\n",
    separator=" ",
    final_semicolon=True,
    warn=True,
    align=True,
    banner=True,
    comments=True,
)

COMPACT = RenderConfig()

INLINE = RenderConfig(lbrace="", rbrace="")

PRESETS: dict[str, RenderConfig] = {
    "pretty": PRETTY,
    "compact": COMPACT,
    "inline": INLINE,
}
