from datetime import UTC, datetime


class SystemClock:
    def now_utc(self) -> datetime:
        return datetime.now(UTC)

    def now_millis(self) -> int:
        return int(self.now_utc().timestamp() * 1000)


class FixedClock:
    """Clock pinned to a given millisecond; for tests and reproducible imports."""

    def __init__(self, millis: int) -> None:
        self.millis = millis

    def now_millis(self) -> int:
        return self.millis

    def advance(self, millis: int = 1) -> None:
        self.millis += millis
