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

# Weekday tables are indexed from Saturday (0) to Friday (6).

MONTH_FULL_NAME = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)
MONTH_ABBR_NAME = (
    "فرو",
    "ارد",
    "خرد",
    "تیر",
    "مرد",
    "شهر",
    "مهر",
    "آبا",
    "آذر",
    "دی",
    "بهم",
    "اسف",
)
WEEKDAY_FULL_NAME = (
    "شنبه",
    "یکشنبه",
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنج‌شنبه",
    "جمعه",
)
WEEKDAY_ABBR_NAME = ("ش", "ی", "د", "س", "چ", "پ", "ج")
DAY_WORDS = (
    "یک",
    "دو",
    "سه",
    "چهار",
    "پنج",
    "شش",
    "هفت",
    "هشت",
    "نه",
    "ده",
    "یازده",
    "دوازده",
    "سیزده",
    "چهارده",
    "پانزده",
    "شانزده",
    "هفده",
    "هجده",
    "نوزده",
    "بیست",
    "بیست و یک",
    "بیست و دو",
    "بیست و سه",
    "بیست و چهار",
    "بیست و پنج",
    "بیست و شش",
    "بیست و هفت",
    "بیست و هشت",
    "بیست و نه",
    "سی",
    "سی و یک",
)
ANTE_MERIDIEM_ABBR = "ق.ظ"
POST_MERIDIEM_ABBR = "ب.ظ"
ANTE_MERIDIEM = "قبل از ظهر"
POST_MERIDIEM = "بعد از ظهر"
ORDINAL_SUFFIX = "ام"


def __lookup(table: tuple[str, ...], index: int, first: int, what: str) -> str:
    if not first <= index < first + len(table):
        raise IndexError(f"{what} `{index}` is out of range")
    return table[index - first]


def month_name(month: int) -> str:
    return __lookup(MONTH_FULL_NAME, month, 1, "Month")


def month_abbr(month: int) -> str:
    return __lookup(MONTH_ABBR_NAME, month, 1, "Month")


def weekday_name(weekday: int) -> str:
    return __lookup(WEEKDAY_FULL_NAME, weekday, 0, "Weekday")


def weekday_abbr(weekday: int) -> str:
    return __lookup(WEEKDAY_ABBR_NAME, weekday, 0, "Weekday")


def day_words(day: int) -> str:
    return __lookup(DAY_WORDS, day, 1, "Day")


def meridiem(hour: int, verbose: bool = False) -> str:
    if hour < 12:
        return ANTE_MERIDIEM if verbose else ANTE_MERIDIEM_ABBR
    return POST_MERIDIEM if verbose else POST_MERIDIEM_ABBR
