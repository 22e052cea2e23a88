from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from coeff_risk.models.result import AnalysisResult
from coeff_risk.output.formatters import (
    correlation_style,
    fmt_number,
    fmt_pct,
    fmt_price,
    risk_color,
    risk_label,
    score_bar,
)


class ResultRenderer:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, result: AnalysisResult) -> None:
        self._render_header(result)
        self._render_scores(result)
        self._render_matrix(result)
        self._render_holdings(result)
        if result.data_quality:
            self.console.print(f"[yellow]⚠ {result.data_quality}[/yellow]")

    def _render_header(self, result: AnalysisResult) -> None:
        window = ""
        if result.window_start and result.window_end:
            window = (
                f"  |  {result.window_start.isoformat()} to "
                f"{result.window_end.isoformat()} ({result.observations} returns)"
            )
        self.console.print()
        self.console.print(
            Panel(
                f"[bold]{len(result.holdings)} assets[/bold] vs "
                f"{result.benchmark}{window}",
                title="Portfolio Risk Report",
                style="cyan",
            )
        )

    def _render_scores(self, result: AnalysisResult) -> None:
        color = risk_color(result.fragility_score)
        text = Text()
        text.append("  Fragility Score: ", style="bold")
        text.append(f"{result.fragility_score}/100", style=color)
        text.append(f"  {risk_label(result.fragility_score)}\n", style=color)
        text.append(f"  {score_bar(result.fragility_score)}\n\n", style=color)
        text.append("  Benchmark Beta: ", style="bold")
        text.append(fmt_number(result.beta), style="bold magenta")
        text.append(f" (vs {result.benchmark})\n")
        text.append("  Avg Correlation: ", style="bold")
        text.append(fmt_number(result.avg_correlation))
        self.console.print(Panel(text, title="Risk Scores", style=color))

    def _render_matrix(self, result: AnalysisResult) -> None:
        m = result.matrix
        table = Table(title="Correlation Matrix", show_header=True)
        table.add_column("", style="cyan")
        for ticker in m.tickers:
            table.add_column(ticker, justify="center")
        for ticker, row in zip(m.tickers, m.values):
            table.add_row(
                ticker,
                *[Text(f"{v:.2f}", style=correlation_style(v)) for v in row],
            )
        self.console.print(table)

    def _render_holdings(self, result: AnalysisResult) -> None:
        table = Table(title="Portfolio Composition", show_header=True)
        table.add_column("Ticker", style="cyan")
        table.add_column("Weight", justify="right")
        table.add_column("Last Price", justify="right")

        for h in result.holdings:
            quote = result.latest_quotes.get(h.ticker)
            price = fmt_price(quote.price, quote.currency) if quote else "N/A"
            table.add_row(h.ticker, fmt_pct(h.weight), price)

        self.console.print(table)
