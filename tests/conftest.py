import pytest

from gahshomar.common import NUMERALS_ENV, TIME_ZONE_ENV


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(TIME_ZONE_ENV, raising=False)
    monkeypatch.delenv(NUMERALS_ENV, raising=False)
