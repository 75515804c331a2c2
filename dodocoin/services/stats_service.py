"""
Derived values over a transaction history.
Pure functions: they never touch storage and never mutate the history.
"""
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from dodocoin.constants import CHART_WIDTH, CHART_HEIGHT, CHART_MIN_SCALE, WEEK_DAYS
from dodocoin.schemas import DailyTotal, Transaction, WeeklySummary
from dodocoin.services.date_service import DateService

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def weekly_summary(history: Sequence[Transaction], now: Optional[datetime] = None) -> WeeklySummary:
    """
    Summarize the last 7 days.

    The average always divides by 7, however many days actually have data.
    Transactions with unreadable timestamps are left out.
    """
    now = now or DateService.now()
    week_start = DateService.week_start(now)

    earned = 0
    spent = 0
    for t in history:
        try:
            ts = DateService.parse_timestamp(t.date)
        except ValueError:
            continue
        if ts < week_start:
            continue
        if t.amount > 0:
            earned += t.amount
        else:
            spent += t.amount

    net = earned + spent
    return WeeklySummary(
        earned=earned,
        spent=spent,
        net=net,
        avg_per_day=net / WEEK_DAYS
    )


def daily_totals(history: Sequence[Transaction]) -> List[DailyTotal]:
    """Net amount per calendar day, most recent day first"""
    totals: Dict[str, int] = defaultdict(int)
    for t in history:
        totals[DateService.date_key(t.date)] += t.amount
    return [
        DailyTotal(date=day, total=totals[day])
        for day in sorted(totals, reverse=True)
    ]


def running_balance_points(history: Sequence[Transaction]) -> List[int]:
    """
    Balance after each transaction, in chronological order.

    For charting only; the ledger's stored balance stays authoritative.
    Expects most-recent-first history; equal timestamps keep application order.
    Unreadable timestamps sort first.
    """
    ordered = sorted(reversed(history), key=_chronological_key)

    points = []
    running = 0
    for t in ordered:
        running += t.amount
        points.append(running)
    return points


def _chronological_key(t: Transaction) -> datetime:
    try:
        return DateService.parse_timestamp(t.date)
    except ValueError:
        return _EARLIEST


def balance_chart_path(
    points: Sequence[int],
    width: int = CHART_WIDTH,
    height: int = CHART_HEIGHT
) -> str:
    """
    SVG path for the balance line chart.

    The vertical scale is the largest point, but at least 10.
    Returns an empty string for fewer than two points.
    """
    if len(points) < 2:
        return ""

    max_balance = max(max(points), CHART_MIN_SCALE)
    last = len(points) - 1

    segments = []
    for i, value in enumerate(points):
        x = i / last * width
        y = height - value / max_balance * height
        command = "M" if i == 0 else "L"
        segments.append(f"{command} {_format_number(x)} {_format_number(y)}")
    return " ".join(segments)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
