"""
Rate Source Interface

계약:
- fetch(currency): 기준 통화 1단위당 target 통화 환율 mapping 반환
- 실패 시 FetchError (재시도 없음)
- 환율은 양수여야 함 (검증은 그래프 변환 직전에 수행)
- 통화 universe는 유한하고 닫혀 있어야 함 (그래프 수집 종료 조건)
"""

from abc import ABC, abstractmethod
from typing import Dict


class RateSource(ABC):
    """
    환율 조회 인터페이스

    책임:
    - 단일 기준 통화 환율 조회 (동기)
    - 에러를 FetchError로 변환
    """

    @abstractmethod
    def fetch(self, currency: str) -> Dict[str, float]:
        """
        기준 통화 환율 조회

        Args:
            currency: 통화 코드 (예: "USD")

        Returns:
            {target 통화 코드: rate}

        Raises:
            FetchError: 조회 실패
        """
        pass

    def close(self) -> None:
        """리소스 정리 (기본: no-op)"""
        pass
