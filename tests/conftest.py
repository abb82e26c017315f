import pytest
from splitledger.schemas.transaction import Expense, Settlement


@pytest.fixture
def roster():
    return ["alice", "bob", "carol"]


@pytest.fixture
def dinner():
    return Expense(payer_id="alice", amount=90, shared_by_ids=["alice", "bob", "carol"], title="Dinner")


@pytest.fixture
def make_expense():
    def _make(payer, amount, shared_by, **kwargs):
        return Expense(payer_id=payer, amount=amount, shared_by_ids=list(shared_by), **kwargs)
    return _make


@pytest.fixture
def make_settlement():
    def _make(payer, receiver, amount, **kwargs):
        return Settlement(payer_id=payer, receiver_id=receiver, amount=amount, **kwargs)
    return _make
