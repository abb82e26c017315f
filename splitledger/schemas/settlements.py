from pydantic import BaseModel, Field
from splitledger.schemas.transaction import ParticipantId, Settlement

class SettlementInstruction(BaseModel):
    from_id: ParticipantId
    to_id: ParticipantId
    amount: float = Field(gt=0, allow_inf_nan=False)

    def to_transaction(self, **metadata) -> Settlement:
        """Settlement record to store once this transfer actually happens."""
        return Settlement(
            payer_id=self.from_id,
            receiver_id=self.to_id,
            amount=self.amount,
            **metadata
        )
