"""
Forex Graph Storage (JSON)

그래프 snapshot 저장/로드.

Format:
    {"USD": {"EUR": 0.91, "KRW": 1420.5}, "EUR": {"USD": 1.09}, ...}

기본 파일명: "<unix time ns>-forex-graph.json" (실행마다 고유)
"""

import json
import logging
import time
from pathlib import Path
from typing import Optional, Union

from forex_arbitrage.exceptions import SerializationError
from forex_arbitrage.graph import ForexGraph, edge_count

logger = logging.getLogger(__name__)

DEFAULT_FILE_SUFFIX = "-forex-graph.json"

PathLike = Union[str, Path]


def default_file_name() -> str:
    return f"{time.time_ns()}{DEFAULT_FILE_SUFFIX}"


def save_graph(
    graph: ForexGraph,
    file_name: Optional[PathLike] = None,
    output_dir: Optional[PathLike] = None,
) -> Path:
    """
    그래프를 JSON 파일로 저장

    Args:
        graph: 저장할 그래프
        file_name: 파일명 (None이면 default_file_name())
        output_dir: 저장 디렉토리 (file_name이 상대경로일 때만 적용)

    Returns:
        저장된 파일 경로

    Raises:
        SerializationError: 직렬화 또는 파일 쓰기 실패
    """
    path = Path(file_name) if file_name else Path(default_file_name())
    if output_dir is not None and not path.is_absolute():
        path = Path(output_dir) / path

    try:
        payload = json.dumps(graph, indent=2, sort_keys=True)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(payload)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Graph is not JSON serializable: {e}") from e
    except OSError as e:
        raise SerializationError(f"Failed to write graph to {path}: {e}") from e

    logger.info(f"[GRAPH_STORAGE] Saved {len(graph)} currencies to {path}")
    return path


def load_graph(file_name: PathLike) -> ForexGraph:
    """
    JSON 파일에서 그래프 로드

    Raises:
        SerializationError: 파일 없음, JSON 오류, 구조 오류 (object of objects of numbers)
    """
    path = Path(file_name)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SerializationError(f"Failed to read graph file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SerializationError(f"Graph file {path} is not valid JSON: {e}") from e

    graph = _parse_graph(data, path)
    logger.info(
        f"[GRAPH_STORAGE] Loaded {len(graph)} currencies, {edge_count(graph)} rates from {path}"
    )
    return graph


def _parse_graph(data, path: Path) -> ForexGraph:
    if not isinstance(data, dict):
        raise SerializationError(f"Graph file {path}: top level must be an object")

    graph: ForexGraph = {}
    for source, edges in data.items():
        if not isinstance(edges, dict):
            raise SerializationError(f"Graph file {path}: entry '{source}' must be an object")
        for target, rate in edges.items():
            if isinstance(rate, bool) or not isinstance(rate, (int, float)):
                raise SerializationError(
                    f"Graph file {path}: rate {source}->{target} is not a number ({rate!r})"
                )
        graph[source] = {target: float(rate) for target, rate in edges.items()}
    return graph
