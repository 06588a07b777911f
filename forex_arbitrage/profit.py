"""
Arbitrage Profit Evaluator

탐지된 cycle을 원래 환율 그래프로 재평가하여 실제 차익거래 기회만 선별.

Rules:
- gain = Π raw_graph[path[i]][path[i+1]]
- gain > 1.0 (strict) 인 경우만 기회로 보고
- gain == 1.0 또는 부동소수점 경계 artifact는 제외
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from forex_arbitrage.detector import CyclePath, detect_any_cycle
from forex_arbitrage.graph import ForexGraph, Rate, transform_graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArbitrageOpportunity:
    """
    차익거래 기회

    Attributes:
        path: 통화 변환 순서 (첫 원소 == 마지막 원소)
        gain: 누적 환율 (> 1.0)
    """
    path: Tuple[str, ...]
    gain: Rate

    def describe(self) -> str:
        return f"{' -> '.join(self.path)} (gain: x{self.gain})"


def evaluate_cycle(path: CyclePath, raw_graph: ForexGraph) -> Rate:
    """연속된 통화 쌍의 원래 환율 곱"""
    gain = 1.0
    for source, target in zip(path, path[1:]):
        gain *= raw_graph[source][target]
    return gain


def is_profitable(gain: Rate) -> bool:
    return gain > 1.0


def canonical_rotation(path: CyclePath) -> Tuple[str, ...]:
    """
    회전 동치 cycle 정규화 (최소 통화 코드에서 시작)

    ["B", "C", "A", "B"] → ("A", "B", "C", "A")
    """
    ring = list(path[:-1])
    if not ring:
        return tuple(path)
    pivot = ring.index(min(ring))
    rotated = ring[pivot:] + ring[:pivot]
    return tuple(rotated + [rotated[0]])


def find_opportunities(
    raw_graph: ForexGraph,
    cycles: Iterable[Optional[CyclePath]],
) -> List[ArbitrageOpportunity]:
    """
    후보 cycle → 수익성 있는 기회 목록

    Args:
        raw_graph: 원래 환율 그래프
        cycles: detect_any_cycle 결과 값 (None 포함 가능)

    Returns:
        gain 내림차순 ArbitrageOpportunity 리스트 (회전 중복 제거)
    """
    seen: Set[Tuple[str, ...]] = set()
    opportunities: List[ArbitrageOpportunity] = []

    for cycle in cycles:
        if not cycle:
            continue
        key = canonical_rotation(cycle)
        if key in seen:
            continue
        seen.add(key)

        gain = evaluate_cycle(list(key), raw_graph)
        if not is_profitable(gain):
            logger.debug(f"[PROFIT] Discarded {' -> '.join(key)} (gain={gain})")
            continue
        opportunities.append(ArbitrageOpportunity(path=key, gain=gain))

    return sorted(opportunities, key=lambda opp: opp.gain, reverse=True)


def detect_opportunities(raw_graph: ForexGraph) -> List[ArbitrageOpportunity]:
    """
    전체 파이프라인: 검증 → -ln 변환 → 전 vertex 탐지 → 수익성 평가

    Raises:
        NonPositiveRateError: 잘못된 환율
    """
    transformed = transform_graph(raw_graph)
    logger.info("[PROFIT] Data transformed")

    candidates = detect_any_cycle(transformed)
    logger.info("[PROFIT] Graph has been processed")

    return find_opportunities(raw_graph, candidates.values())
