from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from ulid import ULID

from quickbill.constants import TEMP_ID_PREFIX
from quickbill.models import parse_amount


def new_temporary_id() -> str:
    """Placeholder id for a bill the server has not confirmed yet."""
    return f"{TEMP_ID_PREFIX}{ULID()}"


class Bill(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int | str | None = None
    customer_name: str = ""
    bill_date: str = ""  # 'YYYY-MM-DD'
    amount: float = 0.0
    tax: float = 0.0
    discount: float = 0.0
    total: float | None = None

    @field_validator("customer_name", "bill_date", mode="before")
    @classmethod
    def null_text_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("amount", "tax", "discount", mode="before")
    @classmethod
    def null_number_as_zero(cls, value):
        return 0.0 if value is None else value

    @property
    def display_total(self) -> float:
        # Never trust the stored total; it may be stale.
        return self.amount + self.tax - self.discount

    @property
    def is_temporary(self) -> bool:
        return isinstance(self.id, str) and self.id.startswith(TEMP_ID_PREFIX)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude={"id"})


class BillForm(BaseModel):
    customer_name: str = ""
    bill_date: str = ""
    amount: str = ""
    tax: str = ""
    discount: str = ""

    def numbers(self) -> tuple[float, float, float]:
        values = []
        for text in (self.amount, self.tax, self.discount):
            value = parse_amount(text)
            values.append(value if value is not None else 0.0)
        return values[0], values[1], values[2]

    @property
    def total(self) -> float:
        amount, tax, discount = self.numbers()
        return amount + tax - discount

    @property
    def live_total(self) -> str:
        return f"{self.total:.2f}"

    @property
    def is_complete(self) -> bool:
        return bool(self.customer_name.strip()) and bool(self.bill_date.strip())

    def to_bill(self) -> Bill:
        amount, tax, discount = self.numbers()
        return Bill(
            customer_name=self.customer_name,
            bill_date=self.bill_date,
            amount=amount,
            tax=tax,
            discount=discount,
            total=amount + tax - discount,
        )
