from pydantic import BaseModel
from splitledger.schemas.transaction import ParticipantId

class BalanceRecord(BaseModel):
    participant_id: ParticipantId
    total_paid: float = 0.0
    fair_share: float = 0.0
    # positive: the group owes them, negative: they owe the group
    net_balance: float = 0.0
