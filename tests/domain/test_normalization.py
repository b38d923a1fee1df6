"""Tests for frequency normalization."""

from decimal import Decimal

import pytest

from src.domain.models import CashFlowItem
from src.domain.services.normalization import (
    annual_total,
    annualize,
    monthly,
    normalize_frequency,
)


@pytest.mark.parametrize(
    ("frequency", "expected"),
    [
        ("weekly", Decimal("5200")),
        ("bi-weekly", Decimal("2600")),
        ("monthly", Decimal("1200")),
        ("quarterly", Decimal("400")),
        ("annual", Decimal("100")),
        ("one-time", Decimal("100")),
    ],
)
def test_annualize_uses_multiplier_table(frequency, expected) -> None:
    assert annualize(Decimal("100"), frequency) == expected


@pytest.mark.parametrize("frequency", [None, "", "fortnightly", "daily"])
def test_annualize_defaults_to_monthly(frequency) -> None:
    """Missing or unknown frequencies count as monthly."""
    assert annualize(Decimal("100"), frequency) == Decimal("1200")


def test_normalize_frequency_strips_and_lowercases() -> None:
    assert normalize_frequency("  Quarterly ") == "quarterly"
    assert normalize_frequency("yearly") == "monthly"


def test_monthly_divides_annual_figure() -> None:
    assert monthly(Decimal("5000"), "monthly") == Decimal("5000")
    assert monthly(Decimal("1200"), "annual") == Decimal("100")
    assert monthly(Decimal("600"), "quarterly") == Decimal("200")


def test_annual_total_sums_items() -> None:
    items = [
        CashFlowItem(
            id="a",
            user_id="u",
            name="Salary",
            amount=Decimal("5000"),
            flow_type="inflow",
            frequency="monthly",
        ),
        CashFlowItem(
            id="b",
            user_id="u",
            name="Bonus",
            amount=Decimal("2000"),
            flow_type="inflow",
            frequency="annual",
        ),
    ]

    assert annual_total(items) == Decimal("62000")
    assert annual_total([]) == Decimal("0")
