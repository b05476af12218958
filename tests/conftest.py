"""Shared fixtures: a deterministic fixed-width layout oracle."""

import pytest
from helpers import CountingOracle

from seemore.core.models import TextStyle
from seemore.layout.monospace import MonospaceOracle


@pytest.fixture
def oracle() -> MonospaceOracle:
    return MonospaceOracle()


@pytest.fixture
def counting_oracle() -> CountingOracle:
    return CountingOracle(MonospaceOracle())


@pytest.fixture
def style() -> TextStyle:
    return TextStyle()
