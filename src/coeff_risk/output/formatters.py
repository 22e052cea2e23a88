CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "GBP": "£",
    "EUR": "€",
    "JPY": "¥",
    "CNY": "¥",
}

CRITICAL_FRAGILITY = 70


def fmt_number(value: float | None, decimals: int = 2) -> str:
    if value is None:
        return "N/A"
    return f"{value:,.{decimals}f}"


def fmt_pct(value: float | None, decimals: int = 1) -> str:
    if value is None:
        return "N/A"
    return f"{value:.{decimals}f}%"


def currency_symbol(iso_code: str | None) -> str:
    if not iso_code:
        return "$"
    return CURRENCY_SYMBOLS.get(iso_code.upper(), iso_code)


def fmt_price(value: float | None, currency: str | None = None) -> str:
    if value is None:
        return "N/A"
    return f"{currency_symbol(currency)}{value:,.2f}"


def risk_label(score: int) -> str:
    return "CRITICAL RISK" if score > CRITICAL_FRAGILITY else "WELL DIVERSIFIED"


def risk_color(score: int) -> str:
    return "bold red" if score > CRITICAL_FRAGILITY else "bold green"


def correlation_style(value: float) -> str:
    """Heatmap style: red for positive, blue for negative correlation."""
    if value >= 0.7:
        return "bold white on red"
    if value >= 0.3:
        return "white on dark_red"
    if value > -0.3:
        return "white"
    if value > -0.7:
        return "white on dark_blue"
    return "bold white on blue"


def score_bar(score: int, width: int = 20) -> str:
    filled = round(score / 100 * width)
    return "█" * filled + "░" * (width - filled)
