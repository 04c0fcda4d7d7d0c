import datetime
import os
import sys

import pytest

_MY_DIR = os.path.realpath(os.path.dirname(__file__))
# Test the package from the source tree
sys.path.insert(0, os.path.join(_MY_DIR, os.pardir, os.pardir, "src"))

from datatable_filters.app.config import FilterConfig, reset_config, set_config  # noqa: E402
from datatable_filters.core.columns import (  # noqa: E402
    CheckboxColumnSpec,
    DateColumnSpec,
    DropdownColumnSpec,
    NumberColumnSpec,
    TextColumnSpec,
)


@pytest.fixture(autouse=True)
def default_config():
    config = FilterConfig()
    set_config(config)
    yield config
    reset_config()


@pytest.fixture(scope="session")
def people():
    return [
        {"name": "Hello World", "age": 34, "active": True, "joined": datetime.date(2021, 3, 14), "team": "A"},
        {"name": "jonas", "age": 10, "active": False, "joined": datetime.date(2023, 1, 1), "team": "B"},
        {"name": "Joanna Smith", "age": 20, "active": True, "joined": datetime.date(2022, 7, 30), "team": "C"},
        {"name": "Árpád", "age": 9.5, "active": False, "joined": datetime.date(2021, 3, 13), "team": "A"},
    ]


@pytest.fixture(scope="session")
def name_column():
    return TextColumnSpec("Name", lambda p: p["name"])


@pytest.fixture(scope="session")
def age_column():
    return NumberColumnSpec("Age", lambda p: p["age"])


@pytest.fixture(scope="session")
def active_column():
    return CheckboxColumnSpec("Active", lambda p: p["active"])


@pytest.fixture(scope="session")
def joined_column():
    return DateColumnSpec("Joined", lambda p: p["joined"], date_format="%d.%m.%Y")


@pytest.fixture(scope="session")
def team_column():
    names = {"A": "Alpha", "B": "Bravo", "C": "Charlie"}
    return DropdownColumnSpec("Team", lambda p: p["team"], value_formatter=lambda v: names[v])
