from __future__ import annotations

import pytest

from frontend import config_front_base


def test_env_front_wins_over_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(config_front_base._ENV, "FRONT_PAGE_TITLE", "'From file'")
    monkeypatch.setenv("FRONT_PAGE_TITLE", "From env")

    assert config_front_base._get_env_str("FRONT_PAGE_TITLE") == "From file"


def test_int_parser_caps_and_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRONT_TEST_INT", "9999")
    assert config_front_base._get_env_int("FRONT_TEST_INT", 5, min_v=1, max_v=100) == 100

    monkeypatch.setenv("FRONT_TEST_INT", "abc")
    assert config_front_base._get_env_int("FRONT_TEST_INT", 5, min_v=1, max_v=100) == 5


def test_bool_parser(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRONT_TEST_BOOL", "on")
    assert config_front_base._get_env_bool("FRONT_TEST_BOOL", False) is True

    monkeypatch.setenv("FRONT_TEST_BOOL", "whatever")
    assert config_front_base._get_env_bool("FRONT_TEST_BOOL", False) is False
