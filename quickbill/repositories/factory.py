from quickbill.repositories.base import BillRepository
from quickbill.settings import settings


def get_bill_repository() -> BillRepository:
    from quickbill.repositories.http import HttpBillRepository

    return HttpBillRepository(settings.bills_url)
