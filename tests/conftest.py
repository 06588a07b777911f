# -*- coding: utf-8 -*-
"""
pytest configuration and fixtures

Path bootstrap: ensures imports work from any CWD
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from forex_arbitrage.logging_utils import PACKAGE_LOGGER
from forex_arbitrage.marketdata import StaticRateSource


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """FOREX_ARB_* 환경변수 제거 + 패키지 로거 핸들러 정리"""
    for key in ("BASE_CURRENCY", "API_URL", "TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(f"FOREX_ARB_{key}", raising=False)

    yield

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def triangle_graph():
    """A→B→C→A, 곱 = 1.05 * 1.02 * 0.97 ≈ 1.0389"""
    return {
        "A": {"B": 1.05},
        "B": {"C": 1.02},
        "C": {"A": 0.97},
    }


@pytest.fixture
def efficient_graph():
    """모든 cycle 곱 < 1.0 (차익 없음)"""
    return {
        "USD": {"EUR": 0.90, "GBP": 0.78, "JPY": 149.0},
        "EUR": {"USD": 1.10, "GBP": 0.86, "JPY": 164.0},
        "GBP": {"USD": 1.27, "EUR": 1.15, "JPY": 190.0},
        "JPY": {"USD": 0.0066, "EUR": 0.0060, "GBP": 0.0052},
    }


@pytest.fixture
def closed_universe():
    """닫힌 통화 universe (KRW는 USD에서만 도달, CHF는 도달 불가)"""
    return {
        "USD": {"EUR": 0.91, "GBP": 0.79},
        "EUR": {"USD": 1.09, "KRW": 1450.0},
        "GBP": {"USD": 1.26, "EUR": 1.16},
        "KRW": {"GBP": 0.00054},
        "CHF": {"USD": 1.12},
    }


@pytest.fixture
def static_source(closed_universe):
    return StaticRateSource(closed_universe)
