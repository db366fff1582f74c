import pytest

from eights.messages.localization import Localization


@pytest.fixture(autouse=True, scope="session")
def localization():
    Localization.init()
    yield
