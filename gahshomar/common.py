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

import os
import copy
import logging
import click
import traceback as tb

from enum import Enum
from pathlib import Path
from typing import Literal

MODULE_PATH = Path(__file__).parent.absolute()

DEFAULT_TIME_ZONE = "Asia/Tehran"
LOCAL_TIME_ZONE = "local"
TIME_ZONE_ENV = "GAHSHOMAR_TIME_ZONE"
NUMERALS_ENV = "GAHSHOMAR_NUMERALS"


class NumeralStyle(str, Enum):
    LATIN = "en"
    PERSIAN = "fa"

    @classmethod
    def coerce(cls, value: "NumeralStyle | str | None") -> "NumeralStyle":
        if value is None:
            return default_numeral_style()
        if isinstance(value, NumeralStyle):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise GahshomarError(
                f"Unknown numeral style `{value}`, expected one of "
                + ", ".join(f"`{s.value}`" for s in cls)
            )


class GahshomarError(Exception):
    pass


class InvalidTimestamp(GahshomarError, ValueError):
    pass


class InvalidJalaliDate(GahshomarError, ValueError):
    pass


class ZoneResolutionError(GahshomarError, LookupError):
    pass


def default_time_zone() -> str:
    return os.environ.get(TIME_ZONE_ENV, "").strip() or DEFAULT_TIME_ZONE


def default_numeral_style() -> NumeralStyle:
    value = os.environ.get(NUMERALS_ENV, "").strip().lower()
    if value in (NumeralStyle.LATIN.value, NumeralStyle.PERSIAN.value):
        return NumeralStyle(value)
    return NumeralStyle.PERSIAN


class ColorizedLogFormatter(logging.Formatter):
    level_name_colors = {
        logging.DEBUG: "cyan",
        logging.INFO: "green",
        logging.WARNING: "yellow",
        logging.ERROR: "red",
        logging.CRITICAL: "bright_red",
    }

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: Literal["%", "{", "$"] = "%",
    ):
        super().__init__(fmt, datefmt, style)

    def color_level_name(self, level_name: str, level_no: int) -> str:
        color = self.level_name_colors.get(level_no)
        if color is None:
            return level_name
        return click.style(level_name, fg=color)

    @staticmethod
    def petit_traceback(exception: BaseException | None) -> str:
        frames = []
        while exception is not None:
            for s in tb.extract_tb(exception.__traceback__):
                f = Path(s.filename)
                if not f.is_relative_to(MODULE_PATH):
                    if not frames or frames[-1] != "...":
                        frames.append("...")
                    continue
                frames.append(f"{f.relative_to(MODULE_PATH.parent).as_posix()}:{s.lineno}")
            exception = exception.__cause__ or exception.__context__
        return " => ".join(frames) or "<none>"

    def formatMessage(self, record: logging.LogRecord) -> str:
        exception = record.exc_info[1] if record.exc_info else None
        recordcopy = copy.copy(record)
        levelname = recordcopy.levelname
        seperator = " " * (8 - len(levelname))
        recordcopy.__dict__["levelprefix"] = (
            f"{self.color_level_name(levelname, recordcopy.levelno)}:{seperator}"
        )
        recordcopy.__dict__["exc_class_name"] = click.style(
            type(exception).__name__ if exception else "<none>", fg="bright_cyan"
        )
        recordcopy.__dict__["exception_message"] = click.style(
            str(exception) if exception else "<none>", fg="bright_cyan"
        )
        recordcopy.__dict__["petit_traceback"] = click.style(
            self.petit_traceback(exception), fg="cyan"
        )
        return "\n".join(
            l if i == 0 else f"{' ' * 10}{l}"
            for i, l in enumerate(super().formatMessage(recordcopy).split("\n"))
        )

    def formatException(self, ei) -> str:
        # the exception is already summarized by formatMessage
        return ""


LOG_HANDLER = logging.StreamHandler()
LOG_HANDLER.setFormatter(ColorizedLogFormatter("%(levelprefix)s %(message)s"))
LOG_HANDLER.addFilter(lambda r: r.levelno < logging.ERROR)
ERR_LOG_HANDLER = logging.StreamHandler()
ERR_LOG_HANDLER.setFormatter(
    ColorizedLogFormatter(
        "%(levelprefix)s %(message)s\n%(exc_class_name)s %(exception_message)s\nin %(petit_traceback)s"
    )
)
ERR_LOG_HANDLER.addFilter(lambda r: r.levelno >= logging.ERROR)
LOGGER = logging.getLogger("gahshomar")
LOGGER.addHandler(LOG_HANDLER)
LOGGER.addHandler(ERR_LOG_HANDLER)
LOGGER.setLevel(logging.INFO)
