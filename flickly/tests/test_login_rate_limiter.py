from flickly.infrastructure.adapters.services.in_memory_login_rate_limiter import InMemoryLoginRateLimiter


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class TestInMemoryLoginRateLimiter:
    def setup_method(self):
        self.clock = FakeClock()
        self.limiter = InMemoryLoginRateLimiter(max_attempts=3, window_seconds=300, clock=self.clock)

    def test_blocks_after_max_failures(self):
        for _ in range(2):
            self.limiter.register_failure("10.0.0.1")
        assert self.limiter.is_blocked("10.0.0.1") is False

        self.limiter.register_failure("10.0.0.1")
        assert self.limiter.is_blocked("10.0.0.1") is True

    def test_clients_are_tracked_separately(self):
        for _ in range(3):
            self.limiter.register_failure("10.0.0.1")

        assert self.limiter.is_blocked("10.0.0.2") is False

    def test_failures_expire_after_window(self):
        for _ in range(3):
            self.limiter.register_failure("10.0.0.1")

        self.clock.now += 300
        assert self.limiter.is_blocked("10.0.0.1") is False

    def test_reset_clears_failures(self):
        for _ in range(3):
            self.limiter.register_failure("10.0.0.1")

        self.limiter.reset("10.0.0.1")
        assert self.limiter.is_blocked("10.0.0.1") is False
