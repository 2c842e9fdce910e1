from file_server_bench.structs import SummaryStats


class DurationStats:
    """Collect durations of successful calls for one operation kind."""

    def __init__(self, operation: str):
        self.operation = operation
        self.durations: list[float] = []

    def record(self, duration: float):
        self.durations.append(duration)

    @property
    def count(self) -> int:
        return len(self.durations)

    @property
    def average(self) -> float | None:
        """Arithmetic mean of the recorded durations, or None if nothing succeeded."""
        if not self.durations:
            return None
        return sum(self.durations) / len(self.durations)

    def summary(self) -> SummaryStats | None:
        """
        Summarize the recorded durations.

        Returns:
            SummaryStats, or None if no call succeeded
        """
        average = self.average
        if average is None:
            return None

        variance = sum(pow(d - average, 2) for d in self.durations) / len(
            self.durations
        )

        return SummaryStats(
            count=self.count,
            average=average,
            minimum=min(self.durations),
            maximum=max(self.durations),
            std_deviation=variance**0.5,
        )

    def __bool__(self) -> bool:
        return bool(self.durations)

    def __repr__(self) -> str:
        return f"DurationStats({self.operation!r}, count={self.count})"
