import logging

import pytest

from monkey import config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("MONKEY_PROMPT", "MONKEY_LOG_LEVEL", "MONKEY_RECURSION_LIMIT"):
        monkeypatch.delenv(var, raising=False)


def test_value_from_env(monkeypatch):
    assert config.value_from_env("MONKEY_PROMPT", "dflt") == "dflt"
    monkeypatch.setenv("MONKEY_PROMPT", "  x  ")
    assert config.value_from_env("MONKEY_PROMPT") == "x"
    monkeypatch.setenv("MONKEY_PROMPT", "   ")
    assert config.value_from_env("MONKEY_PROMPT", "dflt") == "dflt"


def test_prompt(monkeypatch):
    assert config.get_prompt() == ">> "
    monkeypatch.setenv("MONKEY_PROMPT", "monkey> ")
    assert config.get_prompt() == "monkey> "


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, logging.WARNING),
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("error", logging.ERROR),
        ("bogus", logging.WARNING),
    ],
)
def test_log_level(monkeypatch, raw, expected):
    if raw is not None:
        monkeypatch.setenv("MONKEY_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


@pytest.mark.parametrize(
    "raw,expected",
    [(None, None), ("5000", 5000), ("0", None), ("-3", None), ("lots", None)],
)
def test_recursion_limit(monkeypatch, raw, expected):
    if raw is not None:
        monkeypatch.setenv("MONKEY_RECURSION_LIMIT", raw)
    assert config.get_recursion_limit() == expected


def test_use_color(monkeypatch):
    monkeypatch.delenv("MONKEY_NO_COLOR", raising=False)
    assert config.use_color() is True
    monkeypatch.setenv("MONKEY_NO_COLOR", "1")
    assert config.use_color() is False
