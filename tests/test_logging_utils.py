import json

from irregular_dungeon.logging_utils import LEVELS, StructuredLogger, format_record, get_logger, reconfigure


def test_text_record_fields():
    line = format_record("info", "irregular_dungeon.test", event="demo", shape="cross", note="two words", skip=None)
    assert line.startswith("level=info ts=")
    assert "logger=irregular_dungeon.test" in line
    assert "shape=cross" in line
    assert "note=two_words" in line
    assert "skip" not in line


def test_json_record():
    line = format_record("warn", "x", json_mode=True, event="demo", attempts=3, validated=False)
    rec = json.loads(line)
    assert rec["level"] == "warn"
    assert rec["logger"] == "x"
    assert rec["attempts"] == 3
    assert rec["validated"] is False


def test_threshold_and_streams(capsys):
    log = StructuredLogger("t")
    log.level = LEVELS["warn"]
    log.info(event="hidden")
    log.warn(event="shown")
    log.error(event="broken")
    captured = capsys.readouterr()
    assert "hidden" not in captured.out
    assert "event=shown" in captured.out
    assert "event=broken" in captured.err


def test_reconfigure_picks_up_environment(monkeypatch, capsys):
    log = get_logger("irregular_dungeon.test_reconfigure")
    assert get_logger("irregular_dungeon.test_reconfigure") is log
    monkeypatch.setenv("DUNGEON_LOG_LEVEL", "debug")
    monkeypatch.setenv("DUNGEON_LOG_JSON", "1")
    reconfigure()
    log.debug(event="probe")
    rec = json.loads(capsys.readouterr().out.strip())
    assert rec["event"] == "probe"
    assert rec["level"] == "debug"
