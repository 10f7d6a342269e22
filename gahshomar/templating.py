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

from typing import Any, Callable
from datetime import datetime

from jinja2 import Environment
from markupsafe import Markup, escape

from .common import LOGGER, NumeralStyle
from .digits import to_latin, to_persian
from .jformat import format as jformat

DEFAULT_PATTERN = "Y/m/d"


def shield(f: Callable[..., Any]) -> Callable[..., Markup]:
    """Keeps a failing filter from breaking the whole page: the failure is
    logged and the filter renders as an empty string."""

    def wrapper(*args, **kwargs):
        try:
            return escape(f(*args, **kwargs))
        except Exception:
            LOGGER.error(f"Exception in template filter `{f.__name__}`", exc_info=True)
            return Markup()

    wrapper.__f__ = f  # type: ignore[attr-defined]
    wrapper.__name__ = f.__name__
    wrapper.__doc__ = f.__doc__
    return wrapper


def jdate(
    value: int | str | datetime | None,
    pattern: str = DEFAULT_PATTERN,
    zone: str | None = None,
    numerals: NumeralStyle | str | None = None,
) -> str:
    """`{{ post.date | jdate("l j F Y") }}`"""
    return jformat(pattern, value, zone, numerals)


def persian_digits(value: Any) -> str:
    return to_persian(str(value))


def latin_digits(value: Any) -> str:
    return to_latin(str(value))


FILTERS: dict[str, Callable[..., Markup]] = {
    f.__name__: shield(f) for f in (jdate, persian_digits, latin_digits)
}


def register_filters(env: Environment) -> Environment:
    for name, f in FILTERS.items():
        env.filters[name] = f
    return env
