from datetime import datetime
from typing import Annotated, Any, Iterable, List, Literal, Mapping, Optional, Union
from pydantic import BaseModel, Field, TypeAdapter, model_validator

ParticipantId = Union[str, int]


class Expense(BaseModel):
    type: Literal["expense"] = "expense"
    id: Optional[Union[str, int]] = None
    payer_id: ParticipantId = Field(alias="payerId")
    amount: float = Field(gt=0, allow_inf_nan=False)
    shared_by_ids: List[ParticipantId] = Field(default_factory=list, alias="sharedByIds")
    title: Optional[str] = None
    date: Optional[datetime] = None
    group_id: Optional[str] = Field(default=None, alias="groupId")

    class Config:
        populate_by_name = True


class Settlement(BaseModel):
    type: Literal["settlement"] = "settlement"
    id: Optional[Union[str, int]] = None
    payer_id: ParticipantId = Field(alias="payerId")
    receiver_id: ParticipantId = Field(alias="receiverId")
    amount: float = Field(gt=0, allow_inf_nan=False)
    title: Optional[str] = None
    date: Optional[datetime] = None
    group_id: Optional[str] = Field(default=None, alias="groupId")

    class Config:
        populate_by_name = True

    @model_validator(mode="before")
    @classmethod
    def receiver_from_shared_by(cls, data: Any):
        # stored documents keep the receiver as the single sharedByIds entry
        if isinstance(data, Mapping) and "receiver_id" not in data and "receiverId" not in data:
            shared = data.get("sharedByIds", data.get("shared_by_ids"))
            if shared:
                data = {**data, "receiver_id": shared[0]}
        return data


Transaction = Annotated[Union[Expense, Settlement], Field(discriminator="type")]

_transaction_adapter = TypeAdapter(Transaction)


def parse_transaction(record: Union[Mapping[str, Any], Expense, Settlement]) -> Union[Expense, Settlement]:
    """
    Build a transaction from a stored document.

    Accepts camelCase (``payerId``, ``sharedByIds``, ``groupId``) or snake_case
    keys. A missing ``type`` means an expense. Raises ``pydantic.ValidationError``
    for malformed records.
    """
    if isinstance(record, (Expense, Settlement)):
        return record

    data = dict(record)
    if not data.get("type"):
        data["type"] = "expense"

    return _transaction_adapter.validate_python(data)


def parse_transactions(records: Iterable[Any]) -> List[Union[Expense, Settlement]]:
    return [parse_transaction(r) for r in records]
