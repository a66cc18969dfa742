"""Tests for projtrack.config.Config defaults and env overrides."""

from __future__ import annotations

from projtrack.config import DEFAULT_INDENT_WIDTH, INDENT_WIDTH_ENV, Config


def test_default_indent_width(monkeypatch):
    monkeypatch.delenv(INDENT_WIDTH_ENV, raising=False)
    assert Config().indent_width == DEFAULT_INDENT_WIDTH == 2


def test_env_indent_width(monkeypatch):
    monkeypatch.setenv(INDENT_WIDTH_ENV, "4")
    assert Config().indent_width == 4


def test_explicit_width_wins_over_env(monkeypatch):
    monkeypatch.setenv(INDENT_WIDTH_ENV, "4")
    assert Config(indent_width=1).indent_width == 1


def test_invalid_env_falls_back(monkeypatch):
    monkeypatch.setenv(INDENT_WIDTH_ENV, "wide")
    assert Config().indent_width == DEFAULT_INDENT_WIDTH


def test_negative_env_falls_back(monkeypatch):
    monkeypatch.setenv(INDENT_WIDTH_ENV, "-3")
    assert Config().indent_width == DEFAULT_INDENT_WIDTH


def test_verbose_default_off():
    assert Config().verbose is False
