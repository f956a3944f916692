from __future__ import annotations

import asyncio
import logging
from datetime import date
from enum import Enum
from typing import Awaitable, Callable

from quickbill.constants import (
    CREATE_FAILED,
    DELETE_CONFIRMATION,
    DELETE_FAILED,
    FORM_FIELDS,
    FORM_INCOMPLETE,
    NUMERIC_FIELDS,
)
from quickbill.models import parse_amount
from quickbill.models.bill import Bill, BillForm, new_temporary_id
from quickbill.repositories.base import BillApiError, BillRepository

logger = logging.getLogger(__name__)

Confirm = Callable[[str], Awaitable[bool]]


class FailurePolicy(str, Enum):
    SILENT_LOG = "silent-log"
    SURFACE_AND_RELOAD = "surface-and-reload"
    SILENT_FALLBACK = "silent-fallback"


OPERATION_POLICIES = {
    "load": FailurePolicy.SILENT_LOG,
    "create": FailurePolicy.SURFACE_AND_RELOAD,
    "delete": FailurePolicy.SURFACE_AND_RELOAD,
    "sort": FailurePolicy.SILENT_FALLBACK,
    "search": FailurePolicy.SILENT_FALLBACK,
}


def _date_key(bill: Bill) -> date:
    try:
        return date.fromisoformat(bill.bill_date)
    except ValueError:
        return date.min


class BillStore:
    """In-memory view-model over the bill API.

    Every mutation is optimistic: the local list changes first, then the
    server call is made, and the outcome is reconciled according to the
    operation's ``FailurePolicy``. Public operations are serialized through a
    single lock, so completions always apply in the order they were issued.
    """

    def __init__(self, repo: BillRepository, confirm: Confirm) -> None:
        self.repo = repo
        self.confirm = confirm
        self.bills: list[Bill] = []
        self.form_data = BillForm()
        self.search_term = ""
        self.loading = False
        self.error: str | None = None
        self.sort_asc = True
        self._lock = asyncio.Lock()

    async def _handle_failure(
        self,
        operation: str,
        exc: BillApiError,
        *,
        message: str | None = None,
        fallback: Callable[[], list[Bill]] | None = None,
    ) -> None:
        policy = OPERATION_POLICIES[operation]

        if policy is FailurePolicy.SILENT_LOG:
            logger.error("Failed to %s bills: %s", operation, exc)
        elif policy is FailurePolicy.SURFACE_AND_RELOAD:
            logger.exception("Failed to %s bill", operation)
            self.error = message
            await self._reload()
        elif policy is FailurePolicy.SILENT_FALLBACK:
            logger.warning("Server %s failed (%s), using client-side fallback", operation, exc)
            if fallback is not None:
                self.bills = fallback()

    async def _reload(self) -> None:
        """Replace the list with the server's; the caller must hold the lock."""
        self.loading = True
        try:
            self.bills = await self.repo.list_all()
            logger.info("Loaded %d bills", len(self.bills))
        except BillApiError as exc:
            await self._handle_failure("load", exc)
        finally:
            self.loading = False

    def set_field(self, name: str, value: str) -> bool:
        """Update a pending form field. Returns False when the value is rejected."""
        if name not in FORM_FIELDS:
            raise ValueError(f"Unknown form field: {name}")
        if name in NUMERIC_FIELDS and value and parse_amount(value) is None:
            return False
        setattr(self.form_data, name, value)
        return True

    async def load(self) -> None:
        async with self._lock:
            await self._reload()

    async def create(self) -> bool:
        async with self._lock:
            self.error = None
            if not self.form_data.is_complete:
                self.error = FORM_INCOMPLETE
                return False

            bill = self.form_data.to_bill()
            self.bills = [bill.model_copy(update={"id": new_temporary_id()}), *self.bills]

            try:
                await self.repo.create(bill)
            except BillApiError as exc:
                await self._handle_failure("create", exc, message=CREATE_FAILED)
                return False

            logger.info("Bill created for %s", bill.customer_name)
            await self._reload()
            self.form_data = BillForm()
            return True

    async def delete(self, bill_id: int | str) -> bool:
        if not await self.confirm(DELETE_CONFIRMATION):
            logger.debug("Delete of bill %s cancelled", bill_id)
            return False

        async with self._lock:
            self.error = None
            self.bills = [bill for bill in self.bills if bill.id != bill_id]

            try:
                await self.repo.delete(bill_id)
            except BillApiError as exc:
                await self._handle_failure("delete", exc, message=DELETE_FAILED)
                return False

            logger.info("Bill %s deleted", bill_id)
            return True

    async def sort_by_date(self) -> None:
        async with self._lock:
            self.error = None
            ascending = self.sort_asc
            try:
                self.bills = await self.repo.list_sorted()
            except BillApiError as exc:
                await self._handle_failure(
                    "sort",
                    exc,
                    fallback=lambda: sorted(self.bills, key=_date_key, reverse=not ascending),
                )
            self.sort_asc = not self.sort_asc

    async def search(self, term: str | None = None) -> None:
        if term is not None:
            self.search_term = term
        needle = self.search_term.strip()
        if not needle:
            return

        async with self._lock:
            self.error = None
            try:
                self.bills = await self.repo.list_by_customer(needle)
            except BillApiError as exc:
                lowered = needle.casefold()
                await self._handle_failure(
                    "search",
                    exc,
                    fallback=lambda: [b for b in self.bills if lowered in b.customer_name.casefold()],
                )

    async def reset(self) -> None:
        async with self._lock:
            self.search_term = ""
            self.error = None
            await self._reload()
