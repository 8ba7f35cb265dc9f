"""Logging estruturado JSON do Notion Live Board.

Uso:
    from config.logging import configure_logging, get_logger

    # No bootstrap
    configure_logging(level="INFO", service_name="notion_live_board")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("items_fetched", extra={"item_count": 42})

Todo log carrega: asctime, level, logger, message, correlation_id, service.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
