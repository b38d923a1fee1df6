"""Domain constants for the finance taxonomy."""

from decimal import Decimal

ASSET = "asset"
LIABILITY = "liability"

ASSET_ACCOUNT_TYPES = (
    "checking_account",
    "savings_account",
    "brokerage_account",
    "ira",
    "roth_ira",
    "traditional_401k",
    "roth_401k",
    "primary_residence",
    "rental_property",
    "business",
    "other_asset",
)

LIABILITY_ACCOUNT_TYPES = (
    "credit_card",
    "student_loan",
    "mortgage",
    "auto_loan",
    "other_loan",
)

ACCOUNT_TYPE_LABELS = {
    "checking_account": "Checking Account",
    "savings_account": "Savings Account",
    "brokerage_account": "Brokerage Account",
    "ira": "IRA",
    "roth_ira": "Roth IRA",
    "traditional_401k": "401(k)",
    "roth_401k": "Roth 401(k)",
    "primary_residence": "Primary Residence",
    "rental_property": "Rental Property",
    "business": "Business",
    "other_asset": "Other Asset",
    "credit_card": "Credit Card",
    "student_loan": "Student Loan",
    "mortgage": "Mortgage",
    "auto_loan": "Auto Loan",
    "other_loan": "Other Loan",
}

INFLOW = "inflow"
OUTFLOW = "outflow"
FLOW_TYPES = (INFLOW, OUTFLOW)

INFLOW_CATEGORIES = (
    "salary",
    "investment_income",
    "interest_income",
    "business_income",
    "other_income",
)

OUTFLOW_CATEGORIES = (
    "savings",
    "transfers",
    "expenses",
    "debt_payments",
)

SAVINGS_CATEGORY = "savings"
EXPENSES_CATEGORY = "expenses"
DEBT_PAYMENTS_CATEGORY = "debt_payments"

DEFAULT_FREQUENCY = "monthly"

FREQUENCY_MULTIPLIERS = {
    "weekly": Decimal("52"),
    "bi-weekly": Decimal("26"),
    "monthly": Decimal("12"),
    "quarterly": Decimal("4"),
    "annual": Decimal("1"),
    "one-time": Decimal("1"),
}

MONTHS_PER_YEAR = Decimal("12")

NEGLIGIBLE_SEGMENT_VALUE = Decimal("0.0001")


__all__ = [
    "ASSET",
    "LIABILITY",
    "ASSET_ACCOUNT_TYPES",
    "LIABILITY_ACCOUNT_TYPES",
    "ACCOUNT_TYPE_LABELS",
    "INFLOW",
    "OUTFLOW",
    "FLOW_TYPES",
    "INFLOW_CATEGORIES",
    "OUTFLOW_CATEGORIES",
    "SAVINGS_CATEGORY",
    "EXPENSES_CATEGORY",
    "DEBT_PAYMENTS_CATEGORY",
    "DEFAULT_FREQUENCY",
    "FREQUENCY_MULTIPLIERS",
    "MONTHS_PER_YEAR",
    "NEGLIGIBLE_SEGMENT_VALUE",
]
