"""
hvac_diagnosis.utils.logging_config
-----------------------------------
로깅 설정. 라이브러리는 import 시 로깅을 건드리지 않고,
CLI 등 실행 진입점에서 setup_logging() 을 호출한다.
"""

import json
import logging
from logging.config import dictConfig
from typing import Any, Dict, Optional

from hvac_diagnosis.config.settings import settings

TEXT_FMT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base: Dict[str, Any] = {
            "ts": record.created,
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        return json.dumps(base, ensure_ascii=False)


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    level = (level or settings.LOG_LEVEL).upper()
    fmt = (fmt or settings.LOG_FORMAT).upper()

    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {"format": TEXT_FMT},
            "json": {"()": JsonFormatter},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "json" if fmt == "JSON" else "text",
            }
        },
        "loggers": {
            "hvac_diagnosis": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    })
