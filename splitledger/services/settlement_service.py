import logging
import math
from typing import Dict, Iterable, List
from splitledger.core.utils import EPSILON, is_zero
from splitledger.schemas.balances import BalanceRecord
from splitledger.schemas.settlements import SettlementInstruction
from splitledger.schemas.transaction import ParticipantId
from splitledger.services.balance_service import Balances, as_records

logger = logging.getLogger(__name__)


def compute_settlements(balances: Balances) -> List[SettlementInstruction]:
    """
    Greedy largest-balance-first matching of debtors to creditors.

    Not a minimum-transaction solver; it is linear after sorting and
    usually close. Equal balances keep their input order.
    The caller's records are copied, never modified.
    """
    working = []
    for b in as_records(balances):
        # overflowed balances (inf / nan) cannot be matched
        if not math.isfinite(b.net_balance):
            logger.warning("Skipping %s: non-finite balance %r", b.participant_id, b.net_balance)
            continue
        working.append(b.model_copy(deep=True))

    debtors = sorted(
        (b for b in working if b.net_balance < -EPSILON),
        key=lambda b: b.net_balance,
    )
    creditors = sorted(
        (b for b in working if b.net_balance > EPSILON),
        key=lambda b: b.net_balance,
        reverse=True,
    )

    settlements: List[SettlementInstruction] = []
    i = 0
    j = 0

    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]

        amount_owed = abs(debtor.net_balance)
        amount_to_receive = creditor.net_balance

        amount = min(amount_owed, amount_to_receive)

        if amount > EPSILON:
            settlements.append(SettlementInstruction(
                from_id=debtor.participant_id,
                to_id=creditor.participant_id,
                amount=amount
            ))

        debtor.net_balance += amount
        creditor.net_balance -= amount

        if is_zero(debtor.net_balance):
            i += 1
        if creditor.net_balance < EPSILON:
            j += 1

    logger.debug(
        "Matched %d debtors / %d creditors into %d transfers",
        len(debtors), len(creditors), len(settlements)
    )

    return settlements


def apply_settlements(
    balances: Balances,
    instructions: Iterable[SettlementInstruction],
) -> Dict[ParticipantId, BalanceRecord]:
    """
    Balances after every instruction is paid: sender's net goes up,
    receiver's goes down. Works on copies; unknown IDs are skipped.
    """
    result = {b.participant_id: b.model_copy() for b in as_records(balances)}

    for s in instructions:
        sender = result.get(s.from_id)
        receiver = result.get(s.to_id)

        if sender is not None:
            sender.net_balance += s.amount
        if receiver is not None:
            receiver.net_balance -= s.amount

    return result
