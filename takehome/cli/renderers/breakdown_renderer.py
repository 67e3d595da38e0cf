"""Rich renderer for tax breakdowns.

Transforms SDK results into formatted Rich tables.
"""

from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from takehome.sdk.taxes import (
    BracketSlice,
    StateComparison,
    TaxBracket,
    TaxBreakdown,
    TaxJurisdiction,
)

PERIOD_LABELS = {
    "annual": "Annual",
    "monthly": "Monthly",
    "biweekly": "Bi-Weekly",
    "weekly": "Weekly",
    "daily": "Daily",
    "hourly": "Hourly",
}


def fmt_currency(amount: Optional[float]) -> str:
    """Format as whole dollars, rounding half up ($79,180)."""
    if amount is None:
        return "-"
    dollars = int(amount + 0.5) if amount >= 0 else int(amount - 0.5)
    if dollars < 0:
        return f"-${-dollars:,}"
    return f"${dollars:,}"


def fmt_pct(rate: float) -> str:
    """Format a decimal rate with one decimal place (0.2082 -> 20.8%)."""
    return f"{rate * 100:.1f}%"


def fmt_rate(rate: float) -> str:
    """Format a statutory rate without trailing zeros (0.05525 -> 5.525%)."""
    return f"{round(rate * 100, 3):g}%"


def fmt_signed(amount: float) -> str:
    """Format a difference with an explicit sign."""
    if abs(amount) < 0.5:
        return "$0"
    return f"+{fmt_currency(amount)}" if amount > 0 else fmt_currency(amount)


def render_breakdown(
    console: Console,
    breakdown: TaxBreakdown,
    jurisdiction: TaxJurisdiction,
    slices: Sequence[BracketSlice] = (),
) -> None:
    """Render a full breakdown: summary, pay periods, and federal brackets.

    Args:
        console: Rich Console instance
        breakdown: Result of calculate_tax()
        jurisdiction: State the breakdown was computed for
        slices: Federal bracket slices from bracket_breakdown()
    """
    salary = fmt_currency(breakdown.gross_salary)
    console.print(Panel(
        f"[bold green]{fmt_currency(breakdown.take_home_pay)}[/bold green] take-home per year\n"
        f"[dim]{jurisdiction.description}[/dim]",
        title=f"{salary} Salary After Tax in {jurisdiction.name} ({breakdown.tax_year})",
        border_style="blue",
    ))

    _render_summary_table(console, breakdown, jurisdiction)
    _render_period_table(console, breakdown)
    if slices:
        _render_slices_table(console, breakdown, slices)


def _render_summary_table(console: Console, breakdown: TaxBreakdown, jurisdiction: TaxJurisdiction) -> None:
    gross = breakdown.gross_salary

    def share(amount: float) -> str:
        return fmt_pct(amount / gross) if gross > 0 else fmt_pct(0)

    table = Table(title="Tax Breakdown", box=box.ROUNDED)
    table.add_column("", style="bold", min_width=28)
    table.add_column("Amount", justify="right", min_width=12)
    table.add_column("% of Gross", justify="right", min_width=10)

    table.add_row("Gross Salary", fmt_currency(gross), "")
    table.add_row(
        "  [dim]Standard Deduction[/dim]",
        f"[dim]{fmt_currency(breakdown.standard_deduction)}[/dim]",
        "",
    )
    table.add_row(
        "  [dim]Federal Taxable Income[/dim]",
        f"[dim]{fmt_currency(breakdown.federal_taxable_income)}[/dim]",
        "",
    )
    table.add_row("", "", "")
    table.add_row("Federal Income Tax", fmt_currency(breakdown.federal_tax), share(breakdown.federal_tax))
    table.add_row("  Social Security", fmt_currency(breakdown.social_security_tax), share(breakdown.social_security_tax))
    table.add_row("  Medicare", fmt_currency(breakdown.medicare_tax), share(breakdown.medicare_tax))
    if breakdown.additional_medicare_tax > 0:
        table.add_row(
            "  Additional Medicare",
            fmt_currency(breakdown.additional_medicare_tax),
            share(breakdown.additional_medicare_tax),
        )
    table.add_row("FICA Total", fmt_currency(breakdown.fica_total), share(breakdown.fica_total))

    state_label = f"{jurisdiction.name} State Tax"
    if not jurisdiction.has_income_tax:
        state_label += " [green](none)[/green]"
    table.add_row(state_label, fmt_currency(breakdown.state_tax), share(breakdown.state_tax))
    table.add_row("", "", "")
    table.add_row("[bold]Total Tax[/bold]", fmt_currency(breakdown.total_tax), fmt_pct(breakdown.effective_total_rate))
    table.add_row(
        "[bold green]TAKE-HOME PAY[/bold green]",
        f"[bold green]{fmt_currency(breakdown.take_home_pay)}[/bold green]",
        "",
    )
    table.add_row("", "", "")
    table.add_row("[dim]Marginal Federal Rate[/dim]", f"[dim]{fmt_pct(breakdown.federal_marginal_rate)}[/dim]", "")
    table.add_row("[dim]Effective Federal Rate[/dim]", f"[dim]{fmt_pct(breakdown.effective_federal_rate)}[/dim]", "")

    console.print(table)


def _render_period_table(console: Console, breakdown: TaxBreakdown) -> None:
    table = Table(title="Take-Home by Pay Period", box=box.SIMPLE)
    table.add_column("Period")
    table.add_column("Take-Home", justify="right")

    for period, amount in breakdown.pay_periods.items():
        table.add_row(PERIOD_LABELS.get(period, period.title()), fmt_currency(amount))

    console.print(table)
    console.print("[dim]Hourly assumes 2,080 hrs/year (40 hrs x 52 weeks). Daily assumes 260 working days.[/dim]")


def _bracket_label(over: float, up_to: Optional[float]) -> str:
    if up_to is None:
        return f"Over {fmt_currency(over)}"
    return f"{fmt_currency(over)} - {fmt_currency(up_to)}"


def _render_slices_table(console: Console, breakdown: TaxBreakdown, slices: Sequence[BracketSlice]) -> None:
    table = Table(title="Federal Brackets Applied", box=box.SIMPLE)
    table.add_column("Rate", justify="right")
    table.add_column("Bracket")
    table.add_column("Income in Bracket", justify="right")
    table.add_column("Tax", justify="right")

    for s in slices:
        table.add_row(fmt_pct(s.rate), _bracket_label(s.over, s.up_to), fmt_currency(s.income_in_bracket), fmt_currency(s.tax))
    table.add_row("", "[bold]Total[/bold]", fmt_currency(breakdown.federal_taxable_income), fmt_currency(breakdown.federal_tax))

    console.print(table)


def render_comparison(console: Console, rows: List[StateComparison], reference_name: str) -> None:
    """Render a multi-state comparison sorted by take-home."""
    if not rows:
        console.print("[yellow]No states to compare.[/yellow]")
        return

    salary = fmt_currency(rows[0].breakdown.gross_salary)
    table = Table(title=f"Take-Home on {salary} by State ({rows[0].breakdown.tax_year})", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("State", min_width=16)
    table.add_column("State Tax", justify="right")
    table.add_column("Take-Home", justify="right")
    table.add_column("Monthly", justify="right")
    table.add_column("Effective", justify="right")
    table.add_column(f"vs {reference_name}", justify="right")

    for rank, row in enumerate(rows, start=1):
        b = row.breakdown
        diff_style = "green" if row.difference > 0.5 else ("red" if row.difference < -0.5 else "dim")
        table.add_row(
            str(rank),
            row.name,
            fmt_currency(b.state_tax),
            fmt_currency(b.take_home_pay),
            fmt_currency(b.pay_periods["monthly"]),
            fmt_pct(b.effective_total_rate),
            f"[{diff_style}]{fmt_signed(row.difference)}[/{diff_style}]",
        )

    console.print(table)


def render_states(console: Console, jurisdictions: Sequence[TaxJurisdiction], year: int) -> None:
    """Render the state directory with top rates."""
    table = Table(title=f"States ({year})", box=box.SIMPLE)
    table.add_column("State")
    table.add_column("Key", style="dim")
    table.add_column("Type")
    table.add_column("Top Rate", justify="right")

    for j in jurisdictions:
        if not j.has_income_tax:
            kind = "[green]no income tax[/green]"
        elif j.flat_rate is not None:
            kind = "flat"
        else:
            kind = f"progressive ({len(j.tax_brackets)} brackets)"
        table.add_row(f"{j.name} ({j.abbr})", j.key, kind, j.top_rate_display)

    console.print(table)


def render_schedule(
    console: Console,
    title: str,
    brackets: Sequence[TaxBracket],
    standard_deduction: float,
    notes: Sequence[str] = (),
) -> None:
    """Render a bracket schedule with its deduction."""
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Rate", justify="right")
    table.add_column("Taxable Income")

    for b in brackets:
        table.add_row(fmt_rate(b.rate), _bracket_label(b.over, b.up_to))

    console.print(table)
    console.print(f"Standard deduction: {fmt_currency(standard_deduction)}")
    for note in notes:
        console.print(f"[dim]{note}[/dim]")
