import pytest

from larkbridge.relay import RelayConfig
from tests.helpers import LARK_URL, SECRET, FakeLark


@pytest.fixture
def fake_lark() -> FakeLark:
    return FakeLark()


@pytest.fixture
def config() -> RelayConfig:
    return RelayConfig(webhook_secret=SECRET, lark_webhook_url=LARK_URL)
