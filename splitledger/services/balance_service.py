import logging
from typing import Dict, Iterable, Mapping, Sequence, Union
from splitledger.core.utils import EPSILON, is_zero
from splitledger.schemas.balances import BalanceRecord
from splitledger.schemas.transaction import Expense, ParticipantId, Settlement

logger = logging.getLogger(__name__)

Balances = Union[Mapping[ParticipantId, BalanceRecord], Sequence[BalanceRecord]]


def as_records(balances: Balances) -> Iterable[BalanceRecord]:
    if isinstance(balances, Mapping):
        return balances.values()
    return balances


def compute_balances(
    roster: Iterable[ParticipantId],
    transactions: Iterable[Union[Expense, Settlement]],
) -> Dict[ParticipantId, BalanceRecord]:
    """
    Fold transactions over the roster into one balance record per participant.

    Returns:
        {
            participant_id: BalanceRecord
        }
    keyed in roster order.

    Expense: payer is credited the full amount, every sharer is debited
    amount / len(shared_by_ids).
    Settlement: payer's balance goes up, receiver's goes down.

    Payers, sharers and receivers missing from the roster are skipped.
    """
    summary: Dict[ParticipantId, BalanceRecord] = {}
    for pid in roster:
        if pid not in summary:
            summary[pid] = BalanceRecord(participant_id=pid)

    processed = 0
    ignored = set()

    for tx in transactions:
        processed += 1
        amount = float(tx.amount)

        if tx.type == "settlement":
            payer = summary.get(tx.payer_id)
            receiver = summary.get(tx.receiver_id)

            if payer is not None:
                payer.net_balance += amount
            else:
                ignored.add(tx.payer_id)

            if receiver is not None:
                receiver.net_balance -= amount
            else:
                ignored.add(tx.receiver_id)
            continue

        payer = summary.get(tx.payer_id)
        if payer is not None:
            payer.total_paid += amount
            payer.net_balance += amount
        else:
            ignored.add(tx.payer_id)

        split_count = len(tx.shared_by_ids)
        if split_count > 0:
            split_amount = amount / split_count
            for shared_id in tx.shared_by_ids:
                sharer = summary.get(shared_id)
                if sharer is not None:
                    sharer.fair_share += split_amount
                    sharer.net_balance -= split_amount
                else:
                    ignored.add(shared_id)

    if ignored:
        logger.debug("Ignored participants not in roster: %s", sorted(map(str, ignored)))
    logger.debug("Computed %d balances from %d transactions", len(summary), processed)

    return summary


def net_balances(balances: Balances) -> Dict[ParticipantId, float]:
    return {b.participant_id: b.net_balance for b in as_records(balances)}


def is_settled(balances: Balances, tolerance: float = EPSILON) -> bool:
    """
    Settled when abs(net_balance) < tolerance for every participant.
    """
    for b in as_records(balances):
        if not is_zero(b.net_balance, tolerance):
            return False

    return True
