from datetime import datetime, timedelta, timezone

import pytest

from peril import logs
from peril.routing import GameLog


def _log(moment, message="hello", username="alice"):
    return GameLog(current_time=moment, message=message, username=username)


def test_write_log_utc_line(tmp_path):
    path = tmp_path / "game.log"
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    logs.write_log(_log(moment), path, 0)
    assert path.read_text(encoding="utf-8") == "2024-01-02T03:04:05Z alice: hello\n"


def test_write_log_drops_fractional_seconds(tmp_path):
    path = tmp_path / "game.log"
    whole = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    logs.write_log(_log(whole), path, 0)
    logs.write_log(_log(whole.replace(microsecond=123456)), path, 0)
    first, second = path.read_text(encoding="utf-8").splitlines()
    assert first == second


def test_write_log_with_offset(tmp_path):
    path = tmp_path / "game.log"
    zone = timezone(timedelta(hours=2))
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=zone)
    logs.write_log(_log(moment, "attack", "bob"), path, 0)
    assert path.read_text(encoding="utf-8") == "2024-01-02T03:04:05+02:00 bob: attack\n"


def test_write_log_appends(tmp_path):
    path = tmp_path / "game.log"
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    for message in ("one", "two", "three"):
        logs.write_log(_log(moment, message), path, 0)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [line.rsplit(": ", 1)[1] for line in lines] == ["one", "two", "three"]


def test_write_log_sleeps_default_delay(tmp_path, monkeypatch):
    delays = []
    monkeypatch.setattr(logs.time, "sleep", delays.append)
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    logs.write_log(_log(moment), tmp_path / "game.log")
    assert delays == [logs.WRITE_TO_DISK_SLEEP]


def test_write_log_unopenable_path_raises(tmp_path):
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    with pytest.raises(OSError, match="could not open logs file"):
        logs.write_log(_log(moment), tmp_path, 0)