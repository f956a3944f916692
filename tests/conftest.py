"""Root conftest: sample bills and a mocked bill API."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from quickbill.models.bill import Bill


def _sample_bills() -> list[Bill]:
    return [
        Bill(
            id=1,
            customer_name="John Doe",
            bill_date="2025-09-05",
            amount=2000,
            tax=100,
            discount=50,
            total=2050,
        ),
        Bill(
            id=2,
            customer_name="Alice",
            bill_date="2025-09-10",
            amount=500,
            tax=25,
            discount=0,
            total=525,
        ),
    ]


def _mock_repo(bills: list[Bill] | None = None) -> MagicMock:
    repo = MagicMock()
    repo.list_all = AsyncMock(return_value=list(bills or []))
    repo.list_by_customer = AsyncMock(return_value=[])
    repo.list_sorted = AsyncMock(return_value=[])
    repo.create = AsyncMock(return_value=None)
    repo.delete = AsyncMock(return_value=None)
    repo.aclose = AsyncMock(return_value=None)

    async def _exit(*exc_info):
        await repo.aclose()
        return False

    repo.__aenter__ = AsyncMock(return_value=repo)
    repo.__aexit__ = AsyncMock(side_effect=_exit)
    return repo


@pytest.fixture()
def sample_bills():
    return _sample_bills


@pytest.fixture()
def mock_repo():
    return _mock_repo
