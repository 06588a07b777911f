"""
Forex Arbitrage CLI

목적:
- 환율 그래프 수집 (또는 저장된 그래프 로드) 후 차익거래 cycle 탐지
- 단일 명령으로 실행 가능한 CLI 엔트리포인트

Usage:
    python -m forex_arbitrage                       # 수집 + 기본 파일명으로 저장
    python -m forex_arbitrage -o graph.json         # 수집 + graph.json 저장
    python -m forex_arbitrage -i graph.json         # 저장된 그래프 사용 (네트워크 없음)
    python -m forex_arbitrage --base EUR --log-level DEBUG

-i/--input 과 -o/--output 은 동시에 지정할 수 없다 (ConfigurationError).
"""

import argparse
import logging
import sys
from typing import List, Optional

from forex_arbitrage.builder import construct_graph
from forex_arbitrage.config import ForexArbitrageConfig, load_config
from forex_arbitrage.exceptions import ArbitrageError, ConfigurationError
from forex_arbitrage.graph import ForexGraph
from forex_arbitrage.logging_utils import PACKAGE_LOGGER, setup_logging
from forex_arbitrage.marketdata import ExchangeRateRestSource, RateSource
from forex_arbitrage.profit import ArbitrageOpportunity, detect_opportunities
from forex_arbitrage.storage import load_graph, save_graph

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forex-arbitrage",
        description="Graph based forex arbitrage detection",
    )
    parser.add_argument(
        "-i", "--input",
        dest="graph_file",
        default=None,
        help="Path to a serialized graph file (skips network construction)",
    )
    parser.add_argument(
        "-o", "--output",
        dest="save_file",
        default=None,
        help="File name for the newly constructed graph. Default: <unix-time-ns>-forex-graph.json",
    )
    parser.add_argument(
        "--base",
        default=None,
        help="Base currency to start graph construction from (default: config graph.base_currency)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config (default: config/forex.yml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override logging level",
    )
    return parser


def verify_args(args: argparse.Namespace) -> None:
    """
    옵션 조합 검증 (I/O 이전)

    Raises:
        ConfigurationError: graph_file과 save_file 동시 지정
    """
    if args.graph_file is not None and args.save_file is not None:
        raise ConfigurationError(
            "`--input` and `--output` were both defined; only one of them may be supplied"
        )


def build_rate_source(config: ForexArbitrageConfig) -> RateSource:
    return ExchangeRateRestSource(
        api_url=config.rate_source.api_url,
        timeout=config.rate_source.timeout_seconds,
        rates_key=config.rate_source.rates_key,
    )


def acquire_graph(args: argparse.Namespace, config: ForexArbitrageConfig) -> ForexGraph:
    """파일 로드 또는 네트워크 수집 + 저장"""
    if args.graph_file is not None:
        return load_graph(args.graph_file)

    source = build_rate_source(config)
    try:
        graph = construct_graph(config.graph.base_currency, source)
    finally:
        source.close()

    # 명시 파일명은 그대로, 기본 파일명만 output_dir 아래에 저장
    output_dir = config.graph.output_dir if args.save_file is None else None
    save_graph(graph, args.save_file, output_dir=output_dir)
    return graph


def report(opportunities: List[ArbitrageOpportunity]) -> None:
    if not opportunities:
        print("no arbitrage opportunities detected")
        return

    print("arbitrage opportunities detected:")
    for opportunity in opportunities:
        print(opportunity.describe())


def run(args: argparse.Namespace) -> int:
    verify_args(args)

    config = load_config(args.config)
    if args.base:
        config.graph.base_currency = args.base.strip().upper()
    if args.log_level:
        config.logging.level = args.log_level

    setup_logging(config.logging.level, config.logging.file_path)

    graph = acquire_graph(args, config)
    logger.info("--> Data acquired")

    opportunities = detect_opportunities(graph)
    logger.info(f"--> {len(opportunities)} arbitrage opportunities")

    report(opportunities)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI 엔트리포인트"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return run(args)
    except ArbitrageError as e:
        # setup_logging 이전 오류 (옵션 충돌, 설정 오류) 는 stderr 출력만
        if logging.getLogger(PACKAGE_LOGGER).handlers:
            logger.error(f"[CLI] {type(e).__name__}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
