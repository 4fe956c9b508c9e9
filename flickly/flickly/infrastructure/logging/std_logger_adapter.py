import logging
from typing import Dict, Optional

from flickly.domain.ports.services.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    def __init__(self, name: Optional[str] = None, context: Optional[Dict[str, object]] = None):
        self._name = name
        self._logger = logging.getLogger(name)
        self._context = dict(context or {})
        self._prefix = " ".join(f"{key}={value}" for key, value in self._context.items())

    def bind(self, **context) -> "StdLoggerAdapter":
        return StdLoggerAdapter(self._name, {**self._context, **context})

    def _tag(self, msg: str) -> str:
        return f"[{self._prefix}] {msg}" if self._prefix else msg

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(self._tag(msg), *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(self._tag(msg), *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(self._tag(msg), *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(self._tag(msg), *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        self._logger.exception(self._tag(msg), *args, **kwargs)
