"""Tests for the top-level render entry points."""

import dataclasses
import logging

from sheetwright import (
    BANNER,
    COMPACT,
    PRETTY,
    put_css,
    render,
    render_selector,
    render_with,
    with_banner,
)
from sheetwright.model import (
    ChildCombinator,
    ChildOf,
    Element,
    HasClass,
    Nested,
    PropertyDecl,
    Union,
)

DIV = [ChildOf(Element("div"))]
RULES = [PropertyDecl("color", "red")]


class TestRenderWith:
    def test_pretty_appends_banner(self):
        assert render_with(PRETTY, DIV, RULES) == (
            "div {\n  color: red;\n}\n\n/* Generated with sheetwright */\n"
        )

    def test_banner_disabled(self):
        config = dataclasses.replace(PRETTY, banner=False)
        assert render_with(config, DIV, RULES) == "div {\n  color: red;\n}\n"

    def test_compact(self):
        assert render_with(COMPACT, DIV, RULES) == "div{color:red}"

    def test_logs_preset_name(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="sheetwright"):
            render_with(COMPACT, DIV, RULES)
        assert "preset=compact" in caplog.text
        assert "inline=False" in caplog.text

    def test_logs_custom_config(self, caplog):
        config = dataclasses.replace(PRETTY, align=True)
        with caplog.at_level(logging.DEBUG, logger="sheetwright"):
            render_with(config, DIV, RULES)
        assert "preset=custom" in caplog.text
        assert "align=True" in caplog.text

    def test_inputs_not_mutated(self):
        scope = list(DIV)
        rules = list(RULES)
        render_with(PRETTY, scope, rules)
        assert scope == DIV
        assert rules == RULES


class TestRender:
    def test_defaults_to_pretty(self):
        assert render(RULES, scope=DIV) == render_with(PRETTY, DIV, RULES)

    def test_custom_config(self):
        assert render(RULES, COMPACT, DIV) == "div{color:red}"


class TestBanner:
    def test_with_banner(self):
        assert with_banner("a{}") == f"a{{}}\n{BANNER}\n"

    def test_banner_is_comment(self):
        assert BANNER.startswith("/*") and BANNER.endswith("*/")


class TestRenderSelector:
    def test_uses_compact_list_separator(self):
        assert render_selector(Union(Element("a"), Element("b"))) == "a,b"

    def test_combinator(self):
        sel = ChildCombinator(Element("ul"), Element("li", frozenset({HasClass("x")})))
        assert render_selector(sel) == "ul > li.x"


class TestPutCss:
    def test_empty_rules_write_nothing(self, capsys):
        put_css([], COMPACT)
        assert capsys.readouterr().out == ""

    def test_writes_rendered_css(self, capsys):
        put_css([Nested(DIV[0], RULES)], COMPACT)
        assert capsys.readouterr().out == "div{color:red}"

    def test_pretty_by_default(self, capsys):
        put_css([Nested(DIV[0], RULES)])
        assert capsys.readouterr().out.endswith(BANNER + "\n")
