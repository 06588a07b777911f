"""
Forex Graph Builder

기준 통화에서 시작해 RateSource를 반복 조회하여 도달 가능한 전체 환율 그래프 수집.

Design:
- 명시적 worklist (deque, LIFO) 기반 반복 순회. 재귀 없음
- 통화별 조회는 최초 발견 시점에 한 번만 queue에 추가
- fetch 실패 시 즉시 중단, 부분 그래프 반환 없음
- 순회 순서는 fetch 순서에만 영향. 최종 그래프는 동일

Usage:
    source = ExchangeRateRestSource()
    graph = construct_graph("USD", source)
"""

import logging
from collections import deque
from typing import Deque, Set

from forex_arbitrage.graph import ForexGraph, edge_count
from forex_arbitrage.marketdata.interfaces import RateSource

logger = logging.getLogger(__name__)


def construct_graph(base_currency: str, rate_source: RateSource) -> ForexGraph:
    """
    도달 가능한 통화 전체의 환율 그래프 생성

    Args:
        base_currency: 시작 통화 코드 (예: "USD")
        rate_source: 환율 조회 capability

    Returns:
        ForexGraph (key set = base_currency에서 도달 가능한 통화 전체)

    Raises:
        FetchError: 조회 실패 (그래프 폐기)
    """
    graph: ForexGraph = {}
    worklist: Deque[str] = deque([base_currency])
    discovered: Set[str] = {base_currency}

    logger.info(f"[GRAPH_BUILDER] Constructing graph from base={base_currency}")

    while worklist:
        currency = worklist.pop()
        logger.debug(f"[GRAPH_BUILDER] Fetching {currency} (pending={len(worklist)})")
        edges = rate_source.fetch(currency)

        for target in edges:
            if target not in discovered:
                discovered.add(target)
                worklist.append(target)

        graph[currency] = dict(edges)

    logger.info(
        f"[GRAPH_BUILDER] Graph complete: {len(graph)} currencies, {edge_count(graph)} rates"
    )
    return graph
