from portfolio_scoring.models.insights import Impact


def fmt_pct(value: float | None, decimals: int = 1) -> str:
    if value is None:
        return "N/A"
    return f"{value:.{decimals}f}%"


def fmt_deviation(value: float | None, decimals: int = 1) -> str:
    if value is None:
        return "N/A"
    return f"{value:+.{decimals}f}%"


def fmt_number(value: float | None, decimals: int = 2) -> str:
    if value is None:
        return "N/A"
    return f"{value:,.{decimals}f}"


def fmt_value(value: float | None) -> str:
    if value is None:
        return "N/A"
    return f"{value:,.0f}"


def score_label(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Fair"
    return "Poor"


def score_color(score: int) -> str:
    if score >= 80:
        return "bold green"
    if score >= 60:
        return "green"
    if score >= 40:
        return "yellow"
    return "red"


def impact_color(impact: Impact) -> str:
    colors = {
        Impact.HIGH: "bold red",
        Impact.MEDIUM: "orange3",
        Impact.LOW: "yellow",
    }
    return colors.get(impact, "white")


def score_bar(score: int, width: int = 10) -> str:
    filled = round(max(0, min(100, score)) / 100 * width)
    return "█" * filled + "░" * (width - filled)
