# =================================================================================
#  Copyright (c) 2024 Behrooz Vedadian

#  Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to deal
#  in the Software without restriction, including without limitation the rights
#  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
#  copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:

#  The above copyright notice and this permission notice shall be included in all
#  copies or substantial portions of the Software.

#  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
#  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
#  SOFTWARE.
# =================================================================================

from typing import Callable
from datetime import datetime, timedelta

from . import lexicon
from .common import NumeralStyle
from .digits import parse_timestamp, to_persian
from .decompose import GregorianFields, decompose, decompose_datetime, localize
from .jdatetime import (
    gregorian_to_jalali,
    is_leap_jalali,
    jalali_day_of_year,
    jalali_month_length,
)

ESCAPE = "\\"


class JDt(object):
    """Everything a pattern code may need for one instant"""

    def __init__(self, fields: GregorianFields, timestamp: int):
        self.g = fields
        self.timestamp = timestamp
        self.y, self.m, self.d = gregorian_to_jalali(fields.year, fields.month, fields.day)
        self.leap = is_leap_jalali(self.y)
        self.yday = jalali_day_of_year(self.m, self.d)

    @property
    def hour12(self) -> int:
        return self.g.hour % 12 or 12


def utc_offset(offset: timedelta, colon: bool) -> str:
    seconds = int(offset.total_seconds())
    sign = "-" if seconds < 0 else "+"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    return f"{sign}{hours:02}{':' if colon else ''}{minutes:02}"


PATTERN_CODES: dict[str, Callable[[JDt], str]] = {
    "Y": lambda dt: f"{dt.y}",
    "y": lambda dt: f"{(dt.y % 100):02}",
    "m": lambda dt: f"{dt.m:02}",
    "n": lambda dt: f"{dt.m}",
    "d": lambda dt: f"{dt.d:02}",
    "j": lambda dt: f"{dt.d}",
    "F": lambda dt: lexicon.month_name(dt.m),
    "M": lambda dt: lexicon.month_abbr(dt.m),
    "l": lambda dt: lexicon.weekday_name(dt.g.weekday),
    "D": lambda dt: lexicon.weekday_abbr(dt.g.weekday),
    "J": lambda dt: lexicon.day_words(dt.d),
    "S": lambda dt: lexicon.ORDINAL_SUFFIX,
    "H": lambda dt: f"{dt.g.hour:02}",
    "G": lambda dt: f"{dt.g.hour}",
    "h": lambda dt: f"{dt.hour12:02}",
    "g": lambda dt: f"{dt.hour12}",
    "i": lambda dt: f"{dt.g.minute:02}",
    "s": lambda dt: f"{dt.g.second:02}",
    "N": lambda dt: f"{dt.g.weekday + 1}",
    "w": lambda dt: "0" if dt.g.weekday == 6 else f"{dt.g.weekday + 1}",
    "z": lambda dt: f"{dt.yday - 1}",
    "K": lambda dt: f"{365 + dt.leap - dt.yday}",
    "L": lambda dt: "1" if dt.leap else "0",
    "t": lambda dt: f"{jalali_month_length(dt.y, dt.m)}",
    "U": lambda dt: f"{dt.timestamp}",
    "a": lambda dt: lexicon.meridiem(dt.g.hour),
    "A": lambda dt: lexicon.meridiem(dt.g.hour, verbose=True),
    "e": lambda dt: dt.g.zone_name,
    "O": lambda dt: utc_offset(dt.g.utc_offset, colon=False),
    "P": lambda dt: utc_offset(dt.g.utc_offset, colon=True),
}


def render(format_string: str, fields: GregorianFields, timestamp: int) -> str:
    """Expands the pattern codes of `format_string` for the given wall-clock
    fields. A backslash emits the next character verbatim and characters that
    are not pattern codes are copied as they are. Digits are left Latin."""
    dt = JDt(fields, timestamp)
    out = []
    escaped = False
    for c in format_string:
        if escaped:
            out.append(c)
            escaped = False
        elif c == ESCAPE:
            escaped = True
        elif c in PATTERN_CODES:
            out.append(PATTERN_CODES[c](dt))
        else:
            out.append(c)
    return "".join(out)


def __finish(text: str, numeral_style: NumeralStyle | str | None) -> str:
    if NumeralStyle.coerce(numeral_style) is NumeralStyle.PERSIAN:
        return to_persian(text)
    return text


def format_datetime(
    dt: datetime,
    format_string: str,
    numeral_style: NumeralStyle | str | None = None,
    zone_name: str | None = None,
) -> str:
    dt = localize(dt, zone_name)
    fields = decompose_datetime(dt)
    return __finish(render(format_string, fields, int(dt.timestamp())), numeral_style)


def format(
    format_string: str,
    timestamp: int | str | datetime | None = None,
    zone_name: str | None = None,
    numeral_style: NumeralStyle | str | None = None,
) -> str:
    """Formats `timestamp` (now when omitted) as a solar hijri date.

    `timestamp` may be a unix timestamp, a numeric string in Latin or Persian
    digits or a `datetime`. The zone defaults to `Asia/Tehran` and the output
    uses Persian digits unless `numeral_style` is `"en"`.
    """
    if isinstance(timestamp, datetime):
        return format_datetime(timestamp, format_string, numeral_style, zone_name)
    ts = parse_timestamp(timestamp)
    return __finish(render(format_string, decompose(ts, zone_name), ts), numeral_style)
