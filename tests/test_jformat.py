"""
Pattern-code formatting of solar hijri dates
"""

import re
from datetime import datetime, timezone

import pytest

from gahshomar.common import NUMERALS_ENV, GahshomarError
from gahshomar.decompose import decompose
from gahshomar.jformat import PATTERN_CODES, format, format_datetime, render

from . import NOWRUZ_1403_UTC

LAST_SECOND_OF_1402_UTC = NOWRUZ_1403_UTC - 1


def latin(pattern: str, timestamp=NOWRUZ_1403_UTC, zone: str = "Asia/Tehran") -> str:
    return format(pattern, timestamp, zone, "en")


class TestDateCodes:
    def test_nowruz(self) -> None:
        assert latin("Y/m/d", zone="UTC") == "1403/01/01"
        assert latin("y n j", zone="UTC") == "03 1 1"
        assert latin("F", zone="UTC") == "فروردین"
        assert latin("M", zone="UTC") == "فرو"

    def test_weekday_codes(self) -> None:
        # 2024-03-20 is a Wednesday
        assert latin("l") == "چهارشنبه"
        assert latin("D") == "چ"
        assert latin("w N") == "5 5"

    def test_w_counts_from_friday(self) -> None:
        # 2024-03-16 is a Saturday, 2024-03-22 a Friday
        saturday = NOWRUZ_1403_UTC - 4 * 86400
        assert [latin("w", saturday + i * 86400, "UTC") for i in range(7)] == [
            "1", "2", "3", "4", "5", "6", "0"
        ]
        assert latin("N", saturday + 6 * 86400, "UTC") == "7"

    def test_year_codes_on_a_leap_year(self) -> None:
        assert latin("L z K t") == "1 0 365 31"

    def test_year_codes_on_the_last_day_of_a_common_year(self) -> None:
        assert latin("Y/m/d L z K t", LAST_SECOND_OF_1402_UTC, "UTC") == "1402/12/29 0 364 0 29"

    def test_day_words_and_suffix(self) -> None:
        assert latin("J") == "یک"
        assert latin("jS F") == "1ام فروردین"


class TestTimeCodes:
    def test_clock(self) -> None:
        assert latin("H:i:s") == "03:30:00"
        assert latin("G g h") == "3 3 03"
        assert latin("H:i:s", LAST_SECOND_OF_1402_UTC, "UTC") == "23:59:59"
        assert latin("G g h", LAST_SECOND_OF_1402_UTC, "UTC") == "23 11 11"

    def test_midnight_on_twelve_hour_clock(self) -> None:
        assert latin("g h", zone="UTC") == "12 12"

    def test_meridiem(self) -> None:
        assert latin("a") == "ق.ظ"
        assert latin("A") == "قبل از ظهر"
        assert latin("a", NOWRUZ_1403_UTC + 12 * 3600) == "ب.ظ"
        assert latin("A", NOWRUZ_1403_UTC + 12 * 3600) == "بعد از ظهر"

    def test_zone_codes(self) -> None:
        assert latin("e O P") == "Asia/Tehran +0330 +03:30"
        assert latin("e O P", zone="UTC") == "UTC +0000 +00:00"
        assert latin("O P", zone="America/New_York") == "-0400 -04:00"

    def test_raw_timestamp(self) -> None:
        assert latin("U") == str(NOWRUZ_1403_UTC)
        assert latin("U", "۱۷۱۰۸۹۲۸۰۰") == str(NOWRUZ_1403_UTC)


class TestInterpreter:
    def test_escape(self) -> None:
        assert latin("\\Y") == "Y"
        assert latin("\\Y-Y") == "Y-1403"
        assert latin("\\\\") == "\\"

    def test_trailing_backslash_is_dropped(self) -> None:
        assert latin("Y\\") == "1403"

    def test_unknown_codes_are_literal(self) -> None:
        assert latin("Q x, ? !") == "Q x, ? !"
        assert latin("") == ""

    def test_render_keeps_latin_digits(self) -> None:
        fields = decompose(NOWRUZ_1403_UTC, "UTC")
        assert render("Y/m/d U", fields, NOWRUZ_1403_UTC) == f"1403/01/01 {NOWRUZ_1403_UTC}"

    def test_every_code_renders(self) -> None:
        fields = decompose(NOWRUZ_1403_UTC, "Asia/Tehran")
        for code in PATTERN_CODES:
            assert render(code, fields, NOWRUZ_1403_UTC) not in ("", code)


class TestNumeralStyle:
    def test_persian_by_default(self) -> None:
        assert format("Y/m/d", NOWRUZ_1403_UTC) == "۱۴۰۳/۰۱/۰۱"

    def test_default_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(NUMERALS_ENV, "en")
        assert format("Y/m/d", NOWRUZ_1403_UTC) == "1403/01/01"

    def test_explicit_style_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(NUMERALS_ENV, "en")
        assert format("Y", NOWRUZ_1403_UTC, numeral_style="fa") == "۱۴۰۳"

    def test_full_persian_sentence(self) -> None:
        assert format("l j F Y", NOWRUZ_1403_UTC) == "چهارشنبه ۱ فروردین ۱۴۰۳"

    def test_unknown_style(self) -> None:
        with pytest.raises(GahshomarError):
            format("Y", NOWRUZ_1403_UTC, numeral_style="roman")


class TestStability:
    @pytest.mark.parametrize(
        "timestamp",
        [-2208988800, -10**9, -1, 0, 1, NOWRUZ_1403_UTC, 2**31 - 1, 4102444800, 32503680000],
    )
    @pytest.mark.parametrize("zone", ["UTC", "Asia/Tehran", "Pacific/Kiritimati", "Pacific/Pago_Pago"])
    def test_ymd_shape(self, timestamp: int, zone: str) -> None:
        assert re.fullmatch(r"-?\d+/\d{2}/\d{2}", format("Y/m/d", timestamp, zone, "en"))

    def test_now(self) -> None:
        assert re.fullmatch(r"\d{4}/\d{2}/\d{2}", format("Y/m/d", numeral_style="en"))


class TestDatetimeInput:
    def test_aware_datetime(self) -> None:
        dt = datetime(2024, 3, 20, tzinfo=timezone.utc)
        assert format_datetime(dt, "Y/m/d H:i U", "en") == f"1403/01/01 00:00 {NOWRUZ_1403_UTC}"

    def test_aware_datetime_moved_to_zone(self) -> None:
        dt = datetime(2024, 3, 20, tzinfo=timezone.utc)
        assert format_datetime(dt, "H:i", "en", "Asia/Tehran") == "03:30"

    def test_naive_datetime_through_format(self) -> None:
        dt = datetime(2024, 3, 20, 10, 0)
        assert format("Y/m/d H:i U", dt, "Asia/Tehran", "en") == (
            f"1403/01/01 10:00 {NOWRUZ_1403_UTC + 6 * 3600 + 1800}"
        )
