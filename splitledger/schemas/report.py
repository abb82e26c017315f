from typing import Dict, Optional
from pydantic import BaseModel, Field
from splitledger.schemas.transaction import ParticipantId

class SpendingSummary(BaseModel):
    total: float = 0.0
    count: int = 0
    by_group: Dict[str, float] = Field(default_factory=dict)
    by_payer: Dict[ParticipantId, float] = Field(default_factory=dict)
    top_group: Optional[str] = None
    top_payer: Optional[ParticipantId] = None
