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

from typing import Any, NamedTuple
from datetime import datetime

from . import lexicon
from .common import NumeralStyle
from .digits import parse_timestamp, to_persian
from .decompose import decompose, decompose_datetime, localize
from .jdatetime import gregorian_to_jalali, jalali_day_of_year


class JalaliDateRecord(NamedTuple):
    """Solar hijri counterpart of a `getdate` breakdown. Numeric fields are
    `int`s, or Persian-digit strings when requested. `weekday` counts from
    Saturday (0) and `day_of_year` from zero."""

    seconds: int | str
    minutes: int | str
    hours: int | str
    day: int | str
    weekday: int | str
    month: int | str
    year: int | str
    day_of_year: int | str
    timestamp: int | str
    weekday_name: str
    month_name: str

    def as_dict(self) -> dict[str | int, Any]:
        return {
            "seconds": self.seconds,
            "minutes": self.minutes,
            "hours": self.hours,
            "mday": self.day,
            "wday": self.weekday,
            "mon": self.month,
            "year": self.year,
            "yday": self.day_of_year,
            "weekday": self.weekday_name,
            "month": self.month_name,
            0: self.timestamp,
        }


def get_date(
    timestamp: int | str | datetime | None = None,
    zone_name: str | None = None,
    numeral_style: NumeralStyle | str | None = NumeralStyle.LATIN,
) -> JalaliDateRecord:
    if isinstance(timestamp, datetime):
        dt = localize(timestamp, zone_name)
        ts = int(dt.timestamp())
        fields = decompose_datetime(dt)
    else:
        ts = parse_timestamp(timestamp)
        fields = decompose(ts, zone_name)
    jy, jm, jd = gregorian_to_jalali(fields.year, fields.month, fields.day)
    numbers = (
        fields.second,
        fields.minute,
        fields.hour,
        jd,
        fields.weekday,
        jm,
        jy,
        jalali_day_of_year(jm, jd) - 1,
        ts,
    )
    if NumeralStyle.coerce(numeral_style or NumeralStyle.LATIN) is NumeralStyle.PERSIAN:
        numbers = tuple(to_persian(str(n)) for n in numbers)
    return JalaliDateRecord(
        *numbers,
        weekday_name=lexicon.weekday_name(fields.weekday),
        month_name=lexicon.month_name(jm),
    )
