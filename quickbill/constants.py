TEMP_ID_PREFIX = "temp-"

NUMERIC_FIELDS = ("amount", "tax", "discount")
FORM_FIELDS = ("customer_name", "bill_date", *NUMERIC_FIELDS)

APP_TITLE = "QuickBill Management"
LIST_TITLE = "QuickBill — Bills"

DELETE_CONFIRMATION = "Are you sure you want to delete this bill?"

CREATE_FAILED = "Failed to add bill. Try again."
DELETE_FAILED = "Failed to delete bill. Restoring list."
FORM_INCOMPLETE = "Customer name and bill date are required."
