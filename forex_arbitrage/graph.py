# -*- coding: utf-8 -*-
"""
Forex Graph - 그래프 타입 및 가중치 변환

Raw 그래프: source → target → rate (target 통화 수량 / source 통화 1단위)
변환 그래프: 동일 topology, weight = -ln(rate)

변환 후 cycle 가중치 합 < 0  ⇔  rate 곱 > 1.0 (차익거래)

Usage:
    >>> raw = {"USD": {"EUR": 0.9}, "EUR": {"USD": 1.12}}
    >>> weights = transform_graph(raw)
    >>> restore_rate(weights["USD"]["EUR"])  # ≈ 0.9
"""

import math
from typing import Dict, Iterator, Set, Tuple

from forex_arbitrage.exceptions import NonPositiveRateError

# 그래프: 상위 key = vertex, 하위 dict = 해당 vertex의 outgoing edge
Rate = float
ForexGraph = Dict[str, Dict[str, Rate]]


def iter_edges(graph: ForexGraph) -> Iterator[Tuple[str, str, float]]:
    """(source, target, weight) 순회 (dict 삽입 순서 유지)"""
    for source, edges in graph.items():
        for target, weight in edges.items():
            yield source, target, weight


def vertices(graph: ForexGraph) -> Set[str]:
    """top-level key + edge target 전체"""
    result = set(graph)
    for edges in graph.values():
        result.update(edges)
    return result


def edge_count(graph: ForexGraph) -> int:
    return sum(len(edges) for edges in graph.values())


def validate_rates(raw_graph: ForexGraph) -> None:
    """
    -ln 변환 전 환율 검증.

    Raises:
        NonPositiveRateError: rate <= 0, NaN, inf, 숫자가 아닌 값
    """
    for source, target, rate in iter_edges(raw_graph):
        if isinstance(rate, bool) or not isinstance(rate, (int, float)):
            raise NonPositiveRateError(source, target, rate)
        if not math.isfinite(rate) or rate <= 0:
            raise NonPositiveRateError(source, target, rate)


def transform_rate(rate: Rate) -> float:
    return -math.log(rate)


def restore_rate(weight: float) -> Rate:
    return math.exp(-weight)


def transform_graph(raw_graph: ForexGraph) -> ForexGraph:
    """
    곱셈 그래프 → 덧셈 비용 그래프 (-ln(rate)).

    입력 그래프는 변경하지 않는다.

    Raises:
        NonPositiveRateError: 잘못된 환율이 포함된 경우
    """
    validate_rates(raw_graph)
    return {
        source: {target: transform_rate(rate) for target, rate in edges.items()}
        for source, edges in raw_graph.items()
    }
