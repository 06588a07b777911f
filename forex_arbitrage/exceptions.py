# -*- coding: utf-8 -*-
"""
Forex Arbitrage - Exceptions

환율 그래프 수집/탐지 파이프라인 예외 정의.
모든 예외는 재시도 없이 CLI 최상위까지 전파된다.
"""

from typing import Optional


class ArbitrageError(Exception):
    """파이프라인 기본 예외"""
    pass


class ConfigurationError(ArbitrageError):
    """설정 오류 (CLI 옵션 충돌, 잘못된 설정 파일 등)"""
    pass


class FetchError(ArbitrageError):
    """
    환율 조회 실패 (네트워크 오류, non-2xx 응답, 응답 포맷 오류)

    Attributes:
        currency: 조회 중이던 기준 통화
        status_code: HTTP 상태 코드 (있는 경우)
    """

    def __init__(self, message: str, currency: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.currency = currency
        self.status_code = status_code


class SerializationError(ArbitrageError):
    """그래프 파일 저장/로드 실패"""
    pass


class NonPositiveRateError(ArbitrageError):
    """0 이하 (또는 유한하지 않은) 환율. -ln 변환 전에 검출된다."""

    def __init__(self, source: str, target: str, rate):
        super().__init__(f"Invalid rate {source}->{target}: {rate!r} (must be a positive finite number)")
        self.source = source
        self.target = target
        self.rate = rate
