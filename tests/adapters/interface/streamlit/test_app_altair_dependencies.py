"""Tests for the Altair dependency check of the dashboard."""

import sys
import types
from decimal import Decimal

from src.adapters.interface.streamlit import app
from src.domain.models import AllocationSegment, CashflowAllocation


def test_check_altair_dependencies_ok(monkeypatch) -> None:
    """Return ok when numpy/pandas expose expected attributes."""
    monkeypatch.setitem(
        sys.modules,
        "numpy",
        types.SimpleNamespace(ndarray=object),
    )
    monkeypatch.setitem(
        sys.modules,
        "pandas",
        types.SimpleNamespace(Timestamp=object),
    )

    assert app._check_altair_dependencies() == (True, None)


def test_check_altair_dependencies_reports_broken_numpy(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "numpy", types.SimpleNamespace())
    monkeypatch.setitem(
        sys.modules,
        "pandas",
        types.SimpleNamespace(Timestamp=object),
    )

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert "numpy" in message


def test_check_altair_dependencies_reports_broken_pandas(monkeypatch) -> None:
    monkeypatch.setitem(
        sys.modules,
        "numpy",
        types.SimpleNamespace(ndarray=object),
    )
    monkeypatch.setitem(sys.modules, "pandas", types.SimpleNamespace())

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert "pandas" in message


def test_allocation_chart_falls_back_to_table(monkeypatch) -> None:
    """A broken chart stack should show the rows as a table instead."""
    calls = []
    fake_st = types.SimpleNamespace(
        subheader=lambda text: calls.append(("subheader", text)),
        info=lambda text: calls.append(("info", text)),
        warning=lambda text: calls.append(("warning", text)),
        dataframe=lambda data, **kwargs: calls.append(("dataframe", data)),
        altair_chart=lambda chart, **kwargs: calls.append(("chart", chart)),
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (False, "Charts are unavailable: pandas"),
    )
    allocation = CashflowAllocation(
        income=Decimal("100"),
        savings=Decimal("0"),
        expenses=Decimal("0"),
        net=Decimal("100"),
        segments=[
            AllocationSegment(
                key="available",
                label="Available",
                value=Decimal("100"),
                percent=Decimal("100"),
                residual=True,
            )
        ],
    )

    app._render_allocation_chart(allocation, "USD")

    kinds = [kind for kind, _ in calls]
    assert "warning" in kinds
    assert "dataframe" in kinds
    assert "chart" not in kinds
