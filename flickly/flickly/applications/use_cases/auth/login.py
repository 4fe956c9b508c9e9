from flickly.applications.interfaces.dtos.token import Token
from flickly.domain.exceptions import AuthenticationError, RateLimitExceededError
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.domain.ports.services.auth_service import AuthService
from flickly.domain.ports.services.login_rate_limiter import LoginRateLimiter
from flickly.domain.services.validators import normalize_username
from flickly.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class LoginUseCase:
    def __init__(self, user_repository: UserRepository, auth_service: AuthService, rate_limiter: LoginRateLimiter):
        self.user_repository = user_repository
        self.auth_service = auth_service
        self.rate_limiter = rate_limiter

    async def execute(self, username: str, password: str, client_id: str) -> Token:
        if self.rate_limiter.is_blocked(client_id):
            logger.warning(f"Login blocked for client {client_id}: too many failed attempts")
            raise RateLimitExceededError("Too many failed login attempts, try again later")

        user = await self.user_repository.get_by_username(normalize_username(username))

        if not user or not user.password_hash or not self.auth_service.verify_password(password, user.password_hash):
            self.rate_limiter.register_failure(client_id)
            raise AuthenticationError("Incorrect username or password")

        self.rate_limiter.reset(client_id)
        return Token(access_token=self.auth_service.create_access_token(user), token_type="bearer")
