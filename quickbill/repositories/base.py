from __future__ import annotations

from abc import ABC, abstractmethod

from quickbill.models.bill import Bill


class BillApiError(Exception):
    """A bill API call failed: transport error, error status, or bad payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BillRepository(ABC):
    @abstractmethod
    async def list_all(self) -> list[Bill]: ...

    @abstractmethod
    async def list_by_customer(self, customer_name: str) -> list[Bill]: ...

    @abstractmethod
    async def list_sorted(self) -> list[Bill]:
        """Bills ordered by date; the direction is the server's convention."""
        ...

    @abstractmethod
    async def create(self, bill: Bill) -> Bill | None: ...

    @abstractmethod
    async def delete(self, bill_id: int | str) -> None: ...

    async def aclose(self) -> None:
        """Release transport resources; nothing to do by default."""

    async def __aenter__(self) -> BillRepository:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
