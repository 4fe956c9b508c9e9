from abc import ABC, abstractmethod


class LoginRateLimiter(ABC):
    @abstractmethod
    def is_blocked(self, client_id: str) -> bool:
        pass

    @abstractmethod
    def register_failure(self, client_id: str) -> None:
        pass

    @abstractmethod
    def reset(self, client_id: str) -> None:
        pass
