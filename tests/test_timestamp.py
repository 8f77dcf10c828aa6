from datetime import datetime, timedelta, timezone

import pytest

from aesdkit.timestamp import format_timestamp, main, write_timestamp

SAMPLE = datetime(2024, 9, 2, 8, 53, 12, tzinfo=timezone.utc)


def test_format_known_instant():
    assert format_timestamp(SAMPLE) == "Mon 02 Sep 24 08:53:12 AM +0000"


def test_format_keeps_offset():
    aware = SAMPLE.astimezone(timezone(timedelta(hours=2)))
    assert format_timestamp(aware).endswith("+0200")


def test_naive_datetime_gets_an_offset():
    text = format_timestamp(datetime(2024, 9, 2, 8, 53, 12))
    assert text.startswith("Mon 02 Sep 24 08:53:12 AM ")
    assert text.split()[-1][0] in "+-"


def test_default_is_now_with_six_fields():
    assert len(format_timestamp().split()) == 7


def test_float_timestamp_matches_datetime():
    assert format_timestamp(SAMPLE.timestamp()) == format_timestamp(
        SAMPLE.astimezone()
    )


def test_write_timestamp(tmp_path):
    path = tmp_path / "time.txt"
    text = write_timestamp(path, SAMPLE)
    assert path.read_text() == text + "\n"
    assert text == format_timestamp(SAMPLE)


def test_write_timestamp_bad_path(tmp_path):
    with pytest.raises(OSError):
        write_timestamp(tmp_path / "missing" / "time.txt", SAMPLE)


def test_main_prints(capsys):
    assert main([]) == 0
    assert len(capsys.readouterr().out.strip().split()) == 7


def test_main_writes_file(tmp_path):
    path = tmp_path / "out.txt"
    assert main([str(path)]) == 0
    assert path.read_text().endswith("\n")


def test_main_reports_bad_path(tmp_path):
    assert main([str(tmp_path / "missing" / "x.txt")]) == 1