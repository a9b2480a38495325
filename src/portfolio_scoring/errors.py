class PortfolioScoringError(Exception):
    """Base class for errors raised by the scoring engine."""


class UnknownTargetModelError(PortfolioScoringError, KeyError):
    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown target model '{name}' (expected one of: {', '.join(available)})"
        )

    def __str__(self) -> str:
        return self.args[0]


class PortfolioTooLargeError(PortfolioScoringError, ValueError):
    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"Portfolio has {count} holdings; the limit is {limit}")
