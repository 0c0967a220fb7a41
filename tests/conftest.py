"""Test fixtures and utilities."""

import pytest

from smart_input.engine import SmartInputEngine

# Sample OCR lines for testing
SUPERMARKET_RECEIPT = ["超市购物小票", "合计: ¥128.50", "沃尔玛超市"]
RESTAURANT_RECEIPT = ["餐厅账单", "总计: 89.00元", "海底捞火锅"]
GAS_STATION_RECEIPT = ["加油站发票", "金额: 300.00", "中石化加油站"]
PHARMACY_RECEIPT = ["药店购药", "应付: ¥45.80", "同仁堂药店"]
CINEMA_RECEIPT = ["电影票", "票价: 58元", "万达影城"]

ENV_VARS = (
    "SMART_INPUT_PROVIDER",
    "SMART_INPUT_LENIENT_AMOUNTS",
    "SMART_INPUT_SIMULATED_DELAY",
    "SMART_INPUT_LOG_LEVEL",
)


@pytest.fixture
def engine() -> SmartInputEngine:
    """Engine with default extraction settings."""
    return SmartInputEngine()


@pytest.fixture
def supermarket_receipt() -> list[str]:
    return list(SUPERMARKET_RECEIPT)


@pytest.fixture
def restaurant_receipt() -> list[str]:
    return list(RESTAURANT_RECEIPT)


@pytest.fixture
def gas_station_receipt() -> list[str]:
    return list(GAS_STATION_RECEIPT)


@pytest.fixture
def pharmacy_receipt() -> list[str]:
    return list(PHARMACY_RECEIPT)


@pytest.fixture
def cinema_receipt() -> list[str]:
    return list(CINEMA_RECEIPT)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove smart-input environment overrides."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
