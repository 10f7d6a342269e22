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

import re
import sys
import click
import inspect
import argparse

from typing import Any, Callable
from datetime import date as gregorian_date

from .common import LOGGER, GahshomarError
from .digits import to_latin
from .getdate import get_date
from .jformat import format as jformat
from .jdatetime import (
    gregorian_to_jalali,
    is_valid_jalali,
    jalali_to_gregorian,
    require_valid_jalali,
)

reDate = re.compile(r"^(-?\d+)[-/](\d\d?)[-/](\d\d?)$")


class Application(object):
    def __init__(self, name: str):
        self.name = name
        self.commands: dict[str | None, Callable[..., Any]] = {}
        self.parsers: dict[str | None, argparse.ArgumentParser] = {}
        self.default_command: str | None = None
        self.parser_for_help = argparse.ArgumentParser(self.name, conflict_handler="resolve")

    def add_command(self, f: Callable[..., Any]):
        signature = inspect.signature(f)

        namespaces = [
            argparse.ArgumentParser(f"{self.name} {f.__name__}", description=f.__doc__),
            self.parser_for_help.add_argument_group(f"`{f.__name__}` parameters"),
        ]
        for namespace in namespaces:
            for name, p in signature.parameters.items():
                namespace.add_argument(
                    f"--{name}",
                    type=p.annotation,
                    default=p.default,
                    required=p.default == inspect.Parameter.empty,
                )
        namespaces[0].add_argument("command", nargs="?")
        if self.default_command is None:
            self.default_command = f.__name__
        self.parsers[f.__name__] = namespaces[0]
        self.commands[f.__name__] = f
        return f

    def run(self, argv: list[str] | None = None) -> int:
        argv = sys.argv[1:] if argv is None else argv
        command_parser = argparse.ArgumentParser(self.name, add_help=False)
        command_parser.add_argument(
            "command",
            nargs="?",
            choices=self.commands.keys(),
            default=self.default_command,
        )
        command_parser.add_argument("-h", "--help", action="store_true")
        known_args = command_parser.parse_known_args(argv)[0]
        if known_args.help:
            self.parser_for_help.print_help()
            return 0
        args = self.parsers[known_args.command].parse_args(argv)
        try:
            self.commands[known_args.command](
                **{k: v for k, v in args.__dict__.items() if k != "command"}
            )
        except GahshomarError as e:
            LOGGER.error(f"`{known_args.command}` failed", exc_info=e)
            return 1
        except Exception as e:
            LOGGER.error(f"Error running the CLI application `{self.name}`", exc_info=e)
            return 2
        return 0


def parse_date(text: str) -> tuple[int, int, int]:
    m = reDate.match(to_latin(text.strip()))
    if not m:
        raise GahshomarError(f"Invalid date string: `{text}`, expected `YYYY/MM/DD`")
    y, mo, d = (int(e) for e in m.groups())
    return y, mo, d


app = Application("gahshomar")


@app.add_command
def format(pattern: str = "l j F Y H:i:s", timestamp: str = "", zone: str = "", numerals: str = ""):
    """Formats a unix timestamp (now by default) as a solar hijri date"""
    result = jformat(pattern, timestamp or None, zone or None, numerals or None)
    click.echo(result)
    return result


@app.add_command
def to_jalali(date: str):
    y, m, d = parse_date(date)
    try:
        gregorian_date(y, m, d)
    except ValueError as e:
        raise GahshomarError(f"Invalid gregorian date: `{date}`") from e
    result = gregorian_to_jalali(y, m, d)
    click.echo("{}/{:02}/{:02}".format(*result))
    return result


@app.add_command
def to_gregorian(date: str):
    result = jalali_to_gregorian(*require_valid_jalali(*parse_date(date)))
    click.echo("{}-{:02}-{:02}".format(*result))
    return result


@app.add_command
def getdate(timestamp: str = "", zone: str = "", numerals: str = "en"):
    """Prints the solar hijri breakdown of a unix timestamp"""
    record = get_date(timestamp or None, zone or None, numerals or None)
    for k, v in record._asdict().items():
        click.echo(f"{k}: {v}")
    return record


@app.add_command
def validate(date: str):
    """Checks a solar hijri `YYYY/MM/DD` date"""
    y, m, d = parse_date(date)
    result = is_valid_jalali(m, d, y)
    click.echo("valid" if result else "invalid")
    return result


def main() -> int:
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
