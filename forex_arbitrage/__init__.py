"""
Forex Arbitrage

환율 그래프 기반 차익거래 (음수 cycle) 탐지.
"""

from forex_arbitrage.builder import construct_graph
from forex_arbitrage.detector import detect_any_cycle, detect_cycle
from forex_arbitrage.exceptions import (
    ArbitrageError,
    ConfigurationError,
    FetchError,
    NonPositiveRateError,
    SerializationError,
)
from forex_arbitrage.graph import ForexGraph, restore_rate, transform_graph, validate_rates
from forex_arbitrage.profit import (
    ArbitrageOpportunity,
    detect_opportunities,
    evaluate_cycle,
    find_opportunities,
    is_profitable,
)
from forex_arbitrage.storage import load_graph, save_graph

__version__ = "0.1.0"

__all__ = [
    "ArbitrageError",
    "ArbitrageOpportunity",
    "ConfigurationError",
    "FetchError",
    "ForexGraph",
    "NonPositiveRateError",
    "SerializationError",
    "construct_graph",
    "detect_any_cycle",
    "detect_cycle",
    "detect_opportunities",
    "evaluate_cycle",
    "find_opportunities",
    "is_profitable",
    "load_graph",
    "restore_rate",
    "save_graph",
    "transform_graph",
    "validate_rates",
]
