from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging seam for services that must not import the logging backend"""

    @abstractmethod
    def bind(self, **context) -> "LoggerPort":
        """Return a logger that tags every message with `context`"""

    @abstractmethod
    def debug(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def exception(self, msg: str, *args, **kwargs) -> None:
        pass
