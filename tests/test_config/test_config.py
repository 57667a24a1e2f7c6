"""Tests for formatting configuration presets."""

import dataclasses

import pytest

from sheetwright.config import COMPACT, INLINE, PRESETS, PRETTY, RenderConfig


class TestPresets:
    def test_pretty(self):
        assert PRETTY.indentation == "  "
        assert PRETTY.newline == "\n"
        assert PRETTY.separator == " "
        assert (PRETTY.lbrace, PRETTY.rbrace) == ("{", "}")
        assert PRETTY.final_semicolon
        assert PRETTY.warn and PRETTY.align and PRETTY.banner and PRETTY.comments

    def test_compact_elides_everything(self):
        assert COMPACT.indentation == COMPACT.newline == COMPACT.separator == ""
        assert (COMPACT.lbrace, COMPACT.rbrace) == ("{", "}")
        assert not any(
            [COMPACT.final_semicolon, COMPACT.warn, COMPACT.align, COMPACT.banner, COMPACT.comments]
        )

    def test_inline_has_no_braces(self):
        assert INLINE.lbrace == INLINE.rbrace == ""
        assert not INLINE.banner

    def test_presets_by_name(self):
        assert PRESETS == {"pretty": PRETTY, "compact": COMPACT, "inline": INLINE}


class TestIsInline:
    def test_only_inline_preset_is_inline(self):
        assert INLINE.is_inline
        assert not PRETTY.is_inline
        assert not COMPACT.is_inline

    def test_one_empty_brace_is_not_inline(self):
        assert not RenderConfig(lbrace="").is_inline


class TestImmutability:
    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            PRETTY.banner = False  # type: ignore[misc]

    def test_replace_derives_variant(self):
        quiet = dataclasses.replace(PRETTY, banner=False)
        assert not quiet.banner
        assert PRETTY.banner
