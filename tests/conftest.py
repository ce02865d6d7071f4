"""
Shared fixtures for cosmic_lib tests.
"""
import pytest
from unittest.mock import Mock

from cosmic_lib.config import new_configuration
from cosmic_lib.handlers import Interface

KRAKEN = "GA5XIGA5C7QTPTWXQHY6MCJRMTRZDOSHR6EFIBNDQTCQHG262N4GGKTM"
SMARTLANDS = "GCKA6K5PCQ6PNF5RQBF7PQDJWRHO6UOGFMRLK3DYHDOI244V47XKQ4GP"


@pytest.fixture
def interface():
    """A UI adapter recording every interaction."""
    return Mock(spec=Interface)


@pytest.fixture
def conf(interface):
    """A fresh configuration, independent of the module default."""
    return new_configuration(interface=interface)


@pytest.fixture
def kraken():
    return KRAKEN


@pytest.fixture
def smartlands():
    return SMARTLANDS
