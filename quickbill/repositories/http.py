from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter

from quickbill.models.bill import Bill
from quickbill.repositories.base import BillApiError, BillRepository

logger = logging.getLogger(__name__)

_bill_list = TypeAdapter(list[Bill])


async def _log_request(request: httpx.Request) -> None:
    logger.debug("Starting request: %s %s", request.method, request.url)


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    # Hooks run before the body is read.
    await response.aread()
    if response.is_error:
        logger.error(
            "API error: %s %s -> %s %s", request.method, request.url, response.status_code, response.text
        )
    else:
        logger.debug("Response: %s %s -> %s %s", request.method, request.url, response.status_code, response.text)


class HttpBillRepository(BillRepository):
    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None) -> None:
        self.base_url = base_url
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(base_url=base_url)
        self.client.event_hooks["request"].append(_log_request)
        self.client.event_hooks["response"].append(_log_response)
        logger.info("Bill API base URL: %s", base_url)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise BillApiError(
                f"{method} {path} failed with status {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise BillApiError(f"{method} {path} failed: {exc}") from exc
        return response

    async def _get_bills(self, path: str, **kwargs) -> list[Bill]:
        response = await self._send("GET", path, **kwargs)
        try:
            return _bill_list.validate_python(response.json())
        except ValueError as exc:  # JSONDecodeError and ValidationError are both ValueErrors
            raise BillApiError(f"GET {path} returned an invalid bill list") from exc

    async def list_all(self) -> list[Bill]:
        return await self._get_bills("/allBills")

    async def list_by_customer(self, customer_name: str) -> list[Bill]:
        return await self._get_bills("/byCustomer", params={"customerName": customer_name})

    async def list_sorted(self) -> list[Bill]:
        return await self._get_bills("/sortedByDate")

    async def create(self, bill: Bill) -> Bill | None:
        response = await self._send("POST", "/addBill", json=bill.to_payload())
        # Callers only rely on success; a body we cannot read is not a failure.
        try:
            return Bill.model_validate(response.json())
        except ValueError:
            logger.debug("Create response had no readable bill body")
            return None

    async def delete(self, bill_id: int | str) -> None:
        await self._send("DELETE", f"/{bill_id}")
