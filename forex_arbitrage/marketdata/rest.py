"""
Exchange Rate REST Source

계약:
- GET {api_url}?base=<code>
- Response: {"base": "USD", "rates": {"EUR": 0.91, ...}, ...}
- 네트워크 오류 / non-2xx / JSON 아님 / rates 누락 → FetchError
- 재시도 없음, 타임아웃은 session 요청 단위
"""

import logging
from typing import Dict, Optional

import requests

from forex_arbitrage.exceptions import FetchError
from forex_arbitrage.marketdata.interfaces import RateSource

logger = logging.getLogger(__name__)


class ExchangeRateRestSource(RateSource):
    """
    exchangerate.host 호환 REST API 환율 조회

    Usage:
        source = ExchangeRateRestSource()
        rates = source.fetch("USD")  # {"EUR": 0.91, "KRW": 1420.5, ...}
    """

    DEFAULT_API_URL = "https://api.exchangerate.host/latest"

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        rates_key: str = "rates",
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            api_url: 환율 API endpoint
            timeout: HTTP 요청 타임아웃 (초)
            rates_key: 응답 payload 내 환율 mapping key
            session: 재사용할 requests.Session (없으면 생성)
        """
        self.api_url = api_url
        self.timeout = timeout
        self.rates_key = rates_key
        self.session = session or requests.Session()
        self.request_count = 0

    def fetch(self, currency: str) -> Dict[str, float]:
        params = {"base": currency}
        self.request_count += 1

        try:
            resp = self.session.get(self.api_url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = getattr(e.response, "status_code", None)
            logger.error(f"[RATE_SOURCE] HTTP {status_code} for base={currency}: {e}")
            raise FetchError(
                f"Rate request for {currency} failed with status {status_code}",
                currency=currency,
                status_code=status_code,
            ) from e
        except requests.exceptions.RequestException as e:
            # 연결 오류, 타임아웃, 잘못된 URL (InvalidURL / MissingSchema)
            logger.error(f"[RATE_SOURCE] Request error for base={currency}: {e}")
            raise FetchError(f"Rate request for {currency} failed: {e}", currency=currency) from e

        try:
            payload = resp.json()
        except ValueError as e:
            # JSON decode 실패 (requests JSONDecodeError 포함)
            logger.error(f"[RATE_SOURCE] Non-JSON response for base={currency}")
            raise FetchError(f"Rate response for {currency} is not valid JSON", currency=currency) from e

        return self._parse_rates(currency, payload)

    def _parse_rates(self, currency: str, payload) -> Dict[str, float]:
        """payload[rates_key] → {code: float}"""
        if not isinstance(payload, dict) or self.rates_key not in payload:
            raise FetchError(
                f"Rate response for {currency} has no '{self.rates_key}' field",
                currency=currency,
            )

        raw_rates = payload[self.rates_key]
        if not isinstance(raw_rates, dict):
            raise FetchError(
                f"Rate response for {currency}: '{self.rates_key}' is not a mapping",
                currency=currency,
            )

        rates = {}
        for target, value in raw_rates.items():
            if isinstance(value, bool):
                raise FetchError(f"Non-numeric rate {currency}->{target}: {value!r}", currency=currency)
            try:
                rates[str(target)] = float(value)
            except (TypeError, ValueError) as e:
                raise FetchError(
                    f"Non-numeric rate {currency}->{target}: {value!r}",
                    currency=currency,
                ) from e

        logger.debug(f"[RATE_SOURCE] base={currency}: {len(rates)} rates")
        return rates

    def close(self) -> None:
        self.session.close()
