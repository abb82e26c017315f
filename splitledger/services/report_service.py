import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional, Union
from splitledger.schemas.report import SpendingSummary
from splitledger.schemas.transaction import Expense, ParticipantId, Settlement

logger = logging.getLogger(__name__)

DEFAULT_GROUP = "general"


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def _in_window(expense: Expense, start: Optional[datetime], end: Optional[datetime]) -> bool:
    if start is None and end is None:
        return True
    if expense.date is None:
        return False

    when = _as_utc(expense.date)
    if start is not None and when < _as_utc(start):
        return False
    if end is not None and when >= _as_utc(end):
        return False
    return True


def _top(totals: Dict):
    # first seen wins on ties
    top_key = None
    top_amount = None
    for key, amount in totals.items():
        if top_amount is None or amount > top_amount:
            top_key, top_amount = key, amount
    return top_key


def summarize_spending(
    transactions: Iterable[Union[Expense, Settlement]],
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> SpendingSummary:
    """
    Spending totals for a period: overall, per group and per payer.

    Settlements are transfers and are left out. ``start`` is inclusive and
    ``end`` exclusive; naive datetimes are read as UTC. Undated expenses
    only count when no window is given.
    """
    total = 0.0
    count = 0
    by_group: Dict[str, float] = {}
    by_payer: Dict[ParticipantId, float] = {}

    for tx in transactions:
        if tx.type == "settlement":
            continue
        if not _in_window(tx, start, end):
            continue

        amount = float(tx.amount)
        group = tx.group_id or DEFAULT_GROUP

        total += amount
        count += 1
        by_group[group] = by_group.get(group, 0.0) + amount
        by_payer[tx.payer_id] = by_payer.get(tx.payer_id, 0.0) + amount

    logger.debug("Summarized %d expenses totalling %.2f", count, total)

    return SpendingSummary(
        total=total,
        count=count,
        by_group=by_group,
        by_payer=by_payer,
        top_group=_top(by_group),
        top_payer=_top(by_payer),
    )
