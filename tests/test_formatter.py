from datetime import datetime

import pytest

from status_clock.formatter import (
    TimeFormatConfig,
    format_date,
    format_time,
    render_status_text,
)


def _at(hour, minute=5, second=9):
    return datetime(2026, 10, 16, hour, minute, second)


@pytest.mark.parametrize("custom_format", ["", "h:mm a", "ss", "HH:mm:ss"])
def test_military_time_ignores_custom_format(custom_format):
    config = TimeFormatConfig(military_time=True, custom_format=custom_format)
    assert format_time(_at(9), config) == "09:05"
    assert format_time(_at(23, 59, 59), config) == "23:59"


def test_custom_format_24_hour():
    config = TimeFormatConfig(custom_format="HH:mm:ss")
    assert format_time(_at(14), config) == "14:05:09"


def test_custom_format_12_hour_afternoon():
    config = TimeFormatConfig(custom_format="h:mm a")
    assert format_time(_at(14), config) == "2:05 PM"


def test_custom_format_12_hour_midnight():
    config = TimeFormatConfig(custom_format="h:mm a")
    assert format_time(_at(0), config) == "12:05 AM"


def test_noon_is_pm_and_twelve():
    config = TimeFormatConfig(custom_format="hh A")
    assert format_time(_at(12), config) == "12 PM"
    assert format_time(_at(11), config) == "11 AM"


def test_unpadded_tokens():
    config = TimeFormatConfig(custom_format="H:m:s")
    assert format_time(datetime(2026, 1, 1, 7, 3, 4), config) == "7:3:4"


def test_padded_twelve_hour():
    config = TimeFormatConfig(custom_format="hh:mm")
    assert format_time(_at(13), config) == "01:05"


def test_longest_token_wins_without_rescanning():
    assert format_time(_at(14), TimeFormatConfig(custom_format="HHH")) == "1414"
    assert format_time(_at(14), TimeFormatConfig(custom_format="HH:H")) == "14:14"
    assert format_time(_at(14), TimeFormatConfig(custom_format="mmm")) == "055"


def test_expanded_text_is_not_rescanned():
    # "PM" from the first token must stay literal.
    config = TimeFormatConfig(custom_format="a h")
    assert format_time(_at(14), config) == "PM 2"


def test_literals_pass_through():
    config = TimeFormatConfig(custom_format="[HH] - mm!")
    assert format_time(_at(14), config) == "[14] - 05!"


def test_format_without_tokens_is_unchanged():
    config = TimeFormatConfig(custom_format="xyz 123")
    assert format_time(_at(14), config) == "xyz 123"


def test_empty_format_uses_locale_time():
    moment = _at(14)
    text = format_time(moment, TimeFormatConfig())
    assert text
    assert text == moment.strftime("%X")
    assert text != str(moment)
    assert text != moment.isoformat()


def test_formatting_is_pure():
    moment = _at(14)
    config = TimeFormatConfig(custom_format="hh:mm:ss A")
    assert format_time(moment, config) == format_time(moment, config)


def test_render_status_text_with_and_without_date():
    moment = _at(14)
    config = TimeFormatConfig(custom_format="HH:mm")
    assert render_status_text(moment, config) == "$(clock) 14:05"
    assert render_status_text(moment, config, show_date=True) == (
        f"$(clock) 14:05 {format_date(moment)}"
    )


def test_from_settings_reads_both_keys():
    values = {"statusClock.militaryTime": True, "statusClock.customTimeFormat": "h a"}
    config = TimeFormatConfig.from_settings(values)
    assert config == TimeFormatConfig(military_time=True, custom_format="h a")


def test_from_settings_treats_missing_format_as_empty():
    config = TimeFormatConfig.from_settings({})
    assert config == TimeFormatConfig()
