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

import time

from .common import NumeralStyle, InvalidTimestamp

LATIN_SYMBOLS = "0123456789."
PERSIAN_SYMBOLS = "۰۱۲۳۴۵۶۷۸۹٫"
ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

__TO_PERSIAN = str.maketrans(LATIN_SYMBOLS, PERSIAN_SYMBOLS)
__TO_LATIN = str.maketrans(PERSIAN_SYMBOLS + ARABIC_DIGITS, LATIN_SYMBOLS + LATIN_SYMBOLS[:10])


def to_persian(text: str) -> str:
    return text.translate(__TO_PERSIAN)


def to_latin(text: str) -> str:
    """Replaces Persian (and Arabic-Indic) digits and the Persian decimal
    separator with their ASCII counterparts."""
    return text.translate(__TO_LATIN)


def transliterate(text: str, style: NumeralStyle | str) -> str:
    if NumeralStyle.coerce(style) is NumeralStyle.PERSIAN:
        return to_persian(text)
    return to_latin(text)


def parse_timestamp(value: int | str | None) -> int:
    if value is None:
        return int(time.time())
    if isinstance(value, bool):
        raise InvalidTimestamp(f"Expected a unix timestamp, got `{value!r}`")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        try:
            return int(value)
        except (ValueError, OverflowError):
            raise InvalidTimestamp(f"Invalid timestamp: `{value!r}`")
    if isinstance(value, str):
        normalized = to_latin(value.strip())
        try:
            return int(normalized)
        except ValueError:
            pass
        try:
            return int(float(normalized))
        except (ValueError, OverflowError):
            raise InvalidTimestamp(f"Invalid timestamp string: `{value}`")
    raise InvalidTimestamp(f"Expected a unix timestamp, got `{value!r}`")
