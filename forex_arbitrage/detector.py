"""
Negative Cycle Detector (Bellman-Ford)

변환 그래프 (-ln rate) 에서 시작 vertex로부터 도달 가능한 음수 cycle 탐지 및 경로 복원.

Logic:
    1. distance[start] = 0, 나머지 inf (default 조회)
    2. 전체 edge를 |V|회 relax (|V|-1회 + 1회: 마지막 pass 위반 = 음수 cycle)
    3. edge 재검사. 위반 edge (u, v) 발견 시 u부터 predecessor 역추적
       - 이미 경로에 있는 vertex 재등장 → 해당 구간이 cycle
       - 재등장 없이 start(predecessor chain root)에 도달 → 추출 실패, 다음 edge 검사
    4. 위반 없음 → None

Complexity:
    detect_cycle: O(V·E)
    detect_any_cycle: O(V²·E)
"""

import logging
import math
from typing import Dict, List, Optional

from forex_arbitrage.graph import ForexGraph, iter_edges, vertices

logger = logging.getLogger(__name__)

CyclePath = List[str]


def _relax(graph: ForexGraph, start: str, passes: int):
    distance: Dict[str, float] = {start: 0.0}
    predecessor: Dict[str, str] = {}

    for _ in range(passes):
        for u, v, weight in iter_edges(graph):
            candidate = distance.get(u, math.inf) + weight
            if candidate < distance.get(v, math.inf):
                distance[v] = candidate
                predecessor[v] = u

    return distance, predecessor


def _extract_cycle(predecessor: Dict[str, str], origin: str) -> Optional[CyclePath]:
    """
    origin부터 predecessor를 따라가며 경로 앞에 추가.

    Returns:
        [x, ..., x] 형태 cycle (변환 방향 순서), start까지 재등장 없이 도달하면 None
    """
    path: CyclePath = []
    vertex: Optional[str] = origin

    while vertex is not None and vertex not in path:
        path.insert(0, vertex)
        vertex = predecessor.get(vertex)

    if vertex is None:
        # start 도달 (predecessor 없음), cycle 아님
        return None

    end = path.index(vertex)
    return [vertex] + path[:end + 1]


def detect_cycle(graph: ForexGraph, start: str) -> Optional[CyclePath]:
    """
    start에서 도달 가능한 음수 cycle 1개 반환

    Args:
        graph: 변환 그래프 (weight = -ln rate)
        start: 시작 vertex

    Returns:
        첫 위반 edge로부터 복원된 cycle (첫 원소 == 마지막 원소), 없으면 None
    """
    distance, predecessor = _relax(graph, start, len(vertices(graph)))

    for u, v, weight in iter_edges(graph):
        if distance.get(u, math.inf) + weight < distance.get(v, math.inf):
            cycle = _extract_cycle(predecessor, u)
            if cycle is not None:
                logger.debug(f"[CYCLE_DETECTOR] start={start}: cycle {' -> '.join(cycle)}")
                return cycle
            logger.debug(
                f"[CYCLE_DETECTOR] start={start}: violation on {u}->{v} "
                f"but predecessor walk reached start"
            )

    return None


def detect_any_cycle(graph: ForexGraph) -> Dict[str, Optional[CyclePath]]:
    """모든 vertex를 시작점으로 detect_cycle 실행"""
    results = {vertex: detect_cycle(graph, vertex) for vertex in graph}
    found = sum(1 for cycle in results.values() if cycle is not None)
    logger.info(f"[CYCLE_DETECTOR] Scanned {len(results)} start vertices, {found} with negative cycle")
    return results
