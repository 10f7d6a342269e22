import logging

import pytest
from jinja2 import Environment
from markupsafe import Markup

from gahshomar.templating import FILTERS, jdate, register_filters

from . import NOWRUZ_1403_UTC


@pytest.fixture
def env() -> Environment:
    return register_filters(Environment(autoescape=True))


class TestFilters:
    def test_registered(self, env: Environment) -> None:
        for name in ("jdate", "persian_digits", "latin_digits"):
            assert env.filters[name] is FILTERS[name]

    def test_jdate_filter(self, env: Environment) -> None:
        template = env.from_string("{{ ts | jdate('Y/m/d', 'UTC', 'en') }}")
        assert template.render(ts=NOWRUZ_1403_UTC) == "1403/01/01"

    def test_jdate_filter_defaults(self, env: Environment) -> None:
        template = env.from_string("{{ ts | jdate }}")
        assert template.render(ts=NOWRUZ_1403_UTC) == "۱۴۰۳/۰۱/۰۱"

    def test_digit_filters(self, env: Environment) -> None:
        assert env.from_string("{{ 1403 | persian_digits }}").render() == "۱۴۰۳"
        assert env.from_string("{{ '۱۴۰۳' | latin_digits }}").render() == "1403"

    def test_output_is_escaped(self, env: Environment) -> None:
        assert env.from_string("{{ '<b>1</b>' | persian_digits }}").render() == "&lt;b&gt;۱&lt;/b&gt;"

    def test_failures_render_empty_and_are_logged(
        self, env: Environment, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="gahshomar"):
            assert env.from_string("[{{ 'yesterday' | jdate }}]").render() == "[]"
        assert "jdate" in caplog.text

    def test_plain_function(self) -> None:
        assert jdate(NOWRUZ_1403_UTC, "Y", "UTC", "en") == "1403"
        assert isinstance(FILTERS["jdate"](NOWRUZ_1403_UTC), Markup)
