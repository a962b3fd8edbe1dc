"""Fixed-window rate limiters"""

import redis

from app.infrastructure.external_services.rate_limiter import InMemoryRateLimiter, RedisRateLimiter


class FakeClock:

    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_in_memory_limits_per_key():
    clock = FakeClock()
    limiter = InMemoryRateLimiter(limit=3, window_seconds=3600, clock=clock)

    assert [limiter.hit("1.2.3.4") for _ in range(4)] == [True, True, True, False]
    assert limiter.hit("5.6.7.8") is True


def test_in_memory_window_resets():
    clock = FakeClock()
    limiter = InMemoryRateLimiter(limit=1, window_seconds=60, clock=clock)

    assert limiter.hit("ip") is True
    assert limiter.hit("ip") is False
    clock.now += 61
    assert limiter.hit("ip") is True


def test_in_memory_purges_expired_keys():
    clock = FakeClock()
    limiter = InMemoryRateLimiter(limit=1, window_seconds=60, clock=clock)

    limiter.hit("a")
    clock.now += 61
    limiter.hit("b")
    assert "a" not in limiter._windows


class FakePipeline:
    """Only the commands the limiter issues; queued like a real pipeline"""

    def __init__(self, client):
        self.client = client
        self.commands = []

    def set(self, key, value, ex=None, nx=False):
        self.commands.append(("set", key, value, ex, nx))

    def incr(self, key):
        self.commands.append(("incr", key))

    def execute(self):
        if self.client.down:
            raise redis.ConnectionError("connection refused")
        results = []
        for command in self.commands:
            if command[0] == "set":
                _, key, value, ex, nx = command
                if nx and key in self.client.counts:
                    results.append(None)
                    continue
                self.client.counts[key] = value
                self.client.expiries[key] = ex
                results.append(True)
            else:
                key = command[1]
                self.client.counts[key] += 1
                results.append(self.client.counts[key])
        return results


class FakeRedis:

    def __init__(self, down=False):
        self.down = down
        self.counts = {}
        self.expiries = {}

    def pipeline(self):
        return FakePipeline(self)


def test_redis_limiter_counts_hits():
    client = FakeRedis()
    limiter = RedisRateLimiter(client, limit=2, window_seconds=3600)

    assert [limiter.hit("ip") for _ in range(3)] == [True, True, False]
    assert client.expiries == {"ratelimit:ip": 3600}


def test_redis_limiter_fails_open():
    limiter = RedisRateLimiter(FakeRedis(down=True), limit=1, window_seconds=60)
    assert limiter.hit("ip") is True
    assert limiter.hit("ip") is True


def test_redis_limiter_sets_ttl_once_per_window():
    client = FakeRedis()
    limiter = RedisRateLimiter(client, limit=5, window_seconds=60)

    limiter.hit("ip")
    client.expiries["ratelimit:ip"] = 30
    limiter.hit("ip")
    assert client.expiries == {"ratelimit:ip": 30}
    assert client.counts == {"ratelimit:ip": 2}
