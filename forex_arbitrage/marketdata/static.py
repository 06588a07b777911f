"""
Static Rate Source (테스트/오프라인용)

고정 환율 테이블 기반 RateSource. 테이블에 없는 통화 조회 시 FetchError.
"""

from typing import Dict, List, Mapping

from forex_arbitrage.exceptions import FetchError
from forex_arbitrage.marketdata.interfaces import RateSource


class StaticRateSource(RateSource):
    """
    Example:
        >>> source = StaticRateSource({"USD": {"EUR": 0.9}, "EUR": {"USD": 1.1}})
        >>> source.fetch("USD")
        {'EUR': 0.9}
    """

    def __init__(self, table: Mapping[str, Mapping[str, float]]):
        self._table = {base: dict(rates) for base, rates in table.items()}
        self.calls: List[str] = []

    def fetch(self, currency: str) -> Dict[str, float]:
        self.calls.append(currency)
        if currency not in self._table:
            raise FetchError(f"No rates for {currency}", currency=currency)
        return dict(self._table[currency])
