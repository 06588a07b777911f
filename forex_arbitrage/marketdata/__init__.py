"""
Rate Sources

환율 조회 인터페이스 및 구현체.
"""

from .interfaces import RateSource
from .rest import ExchangeRateRestSource
from .static import StaticRateSource

__all__ = [
    "RateSource",
    "ExchangeRateRestSource",
    "StaticRateSource",
]
