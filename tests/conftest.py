import os
from datetime import date

import pytest


# Runs after cmd arg parsing but before the test modules are imported, so
# the settings object does not pick up a local .env or shell overrides
def pytest_configure(config) -> None:
    os.environ["FIRST_DAY_OF_WEEK"] = "0"
    os.environ["LOCALE"] = "en"
    os.environ["LOG_LEVEL"] = "INFO"
    os.environ["LOG_FORMAT"] = "console"


@pytest.fixture
def today() -> date:
    # Thursday
    return date(2016, 3, 17)


@pytest.fixture
def builder(today: date):  # noqa: ANN201
    from calgrid.grid import MonthGridBuilder

    return MonthGridBuilder(clock=lambda: today)


@pytest.fixture
def monday_builder(today: date):  # noqa: ANN201
    from calgrid.grid import MonthGridBuilder

    return MonthGridBuilder(1, clock=lambda: today)
