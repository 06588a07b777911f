"""
Forex Arbitrage Config Loader

config/forex.yml을 로드하고 dataclass로 검증합니다.

우선순위 (높은 순):
1. CLI 옵션 (cli.py에서 적용)
2. 환경변수 (FOREX_ARB_*, .env 포함)
3. YAML 설정 파일
4. dataclass 기본값
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from forex_arbitrage.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/forex.yml"

ENV_PREFIX = "FOREX_ARB_"


@dataclass
class RateSourceConfig:
    """환율 API 설정"""
    api_url: str = "https://api.exchangerate.host/latest"
    timeout_seconds: float = 10.0
    rates_key: str = "rates"


@dataclass
class GraphConfig:
    """그래프 수집 설정"""
    base_currency: str = "USD"
    output_dir: str = "."


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    file_path: Optional[str] = None


@dataclass
class ForexArbitrageConfig:
    """전체 설정"""
    rate_source: RateSourceConfig = field(default_factory=RateSourceConfig)
    graph: GraphConfig = field(default_factory=GraphConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        """
        설정 검증 (타입 + 값)

        Raises:
            ConfigurationError: 잘못된 타입 또는 값
        """
        for name, value in (
            ("rate_source.api_url", self.rate_source.api_url),
            ("rate_source.rates_key", self.rate_source.rates_key),
            ("graph.base_currency", self.graph.base_currency),
            ("graph.output_dir", self.graph.output_dir),
            ("logging.level", self.logging.level),
        ):
            if not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a string (got: {value!r})")
            if not value.strip():
                raise ConfigurationError(f"{name} must not be empty")

        if self.logging.file_path is not None and not isinstance(self.logging.file_path, str):
            raise ConfigurationError(f"logging.file_path must be a string (got: {self.logging.file_path!r})")

        timeout = self.rate_source.timeout_seconds
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigurationError(f"rate_source.timeout_seconds must be a number (got: {timeout!r})")
        if timeout <= 0:
            raise ConfigurationError(f"rate_source.timeout_seconds must be > 0, got {timeout}")

        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.logging.level.upper() not in valid_levels:
            raise ConfigurationError(
                f"logging.level must be one of {valid_levels} (got: {self.logging.level})"
            )

    def normalize(self) -> None:
        """통화 코드 / 로그 레벨 대문자 정규화 (validate 이후 호출)"""
        self.graph.base_currency = self.graph.base_currency.strip().upper()
        self.logging.level = self.logging.level.upper()
        self.rate_source.timeout_seconds = float(self.rate_source.timeout_seconds)


def _section(raw_config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = raw_config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Config section '{name}' must be a mapping")
    return section


def _apply_env_overrides(config: ForexArbitrageConfig) -> None:
    base_currency = os.getenv(f"{ENV_PREFIX}BASE_CURRENCY")
    if base_currency:
        config.graph.base_currency = base_currency

    api_url = os.getenv(f"{ENV_PREFIX}API_URL")
    if api_url:
        config.rate_source.api_url = api_url

    timeout = os.getenv(f"{ENV_PREFIX}TIMEOUT")
    if timeout:
        try:
            config.rate_source.timeout_seconds = float(timeout)
        except ValueError as e:
            raise ConfigurationError(f"{ENV_PREFIX}TIMEOUT must be a number (got: {timeout})") from e

    log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
    if log_level:
        config.logging.level = log_level


def load_config(config_path: Optional[str] = None) -> ForexArbitrageConfig:
    """
    설정 로드 및 검증

    Args:
        config_path: YAML 설정 파일 경로. None이면 DEFAULT_CONFIG_PATH (없으면 기본값 사용)

    Returns:
        ForexArbitrageConfig 인스턴스

    Raises:
        ConfigurationError: 지정한 파일 없음, YAML 오류, 검증 실패
    """
    load_dotenv()

    explicit = config_path is not None
    path = Path(config_path if explicit else DEFAULT_CONFIG_PATH)

    raw_config: Dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(raw_config, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        logger.debug(f"[CONFIG] Loaded {path}")
    elif explicit:
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        config = ForexArbitrageConfig(
            rate_source=RateSourceConfig(**_section(raw_config, "rate_source")),
            graph=GraphConfig(**_section(raw_config, "graph")),
            logging=LoggingConfig(**_section(raw_config, "logging")),
        )
    except TypeError as e:
        # 알 수 없는 key
        raise ConfigurationError(f"Invalid config in {path}: {e}") from e

    _apply_env_overrides(config)
    config.validate()
    config.normalize()
    return config
