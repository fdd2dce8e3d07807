import catalog.logger as logger


def test_truncate_line_marks_truncated():
    out = logger.truncate_line("x" * 50, max_chars=10)
    assert "truncated" in out
    assert logger.truncate_line("short", max_chars=10) == "short"


def test_debug_ctx_is_noop_without_debug_mode(monkeypatch, capsys):
    monkeypatch.setattr(logger, "is_debug_mode", lambda: False)
    calls = []
    monkeypatch.setattr(logger, "info", lambda *a, **k: calls.append(a))

    logger.debug_ctx("catalog", "hidden")

    assert calls == []
    assert capsys.readouterr().out == ""


def test_debug_ctx_uses_progress_in_silent_mode(monkeypatch, capsys):
    monkeypatch.setattr(logger, "is_debug_mode", lambda: True)
    monkeypatch.setattr(logger, "is_silent_mode", lambda: True)

    logger.debug_ctx("catalog", "visible")

    assert capsys.readouterr().out.strip() == "[CATALOG][DEBUG] visible"


def test_debug_ctx_uses_info_when_not_silent(monkeypatch):
    monkeypatch.setattr(logger, "is_debug_mode", lambda: True)
    monkeypatch.setattr(logger, "is_silent_mode", lambda: False)
    calls = []
    monkeypatch.setattr(logger, "info", lambda msg, *a, **k: calls.append(msg))

    logger.debug_ctx("search", "gen=1")

    assert calls == ["[SEARCH][DEBUG] gen=1"]


def test_silent_mode_suppresses_warning_unless_always(monkeypatch):
    monkeypatch.setattr(logger, "is_silent_mode", lambda: True)

    assert logger._should_log() is False
    assert logger._should_log(always=True) is True
