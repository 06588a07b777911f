# -*- coding: utf-8 -*-
"""
Logging Utilities

패키지 공통 로깅 설정. 각 모듈은 logging.getLogger(__name__)만 사용하고,
핸들러 구성은 CLI 진입 시 setup_logging() 한 번으로 처리한다.

특징:
- 콘솔 로그 (stderr)
- 선택적 파일 로그 (일 단위 로테이션)
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] [%(name)s] %(message)s"

PACKAGE_LOGGER = "forex_arbitrage"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    backup_count: int = 7,
) -> logging.Logger:
    """
    패키지 로거 구성

    Args:
        level: 로깅 레벨 ("INFO" 등 문자열 허용)
        log_file: 로그 파일 경로 (None이면 콘솔만)
        backup_count: 보관할 로테이션 파일 수

    Returns:
        패키지 루트 로거
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # 기존 핸들러 제거 (중복 방지)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_path,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
