"""Smoke tests for the vendor-core CLI."""

import json
from pathlib import Path

import pytest

from vendor_core.cli import main
from vendor_core.storage import SALES_SLOT


def _run(data_root: Path, *args: str) -> int:
    return main(["--quiet", "--data-root", str(data_root), *args])


def test_customers_and_sales_flow(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Add a customer, record a sale, then see it on the dashboard."""
    assert _run(tmp_path, "customers", "add", "Asha", "9000000001", "--address", "Stall 4") == 0
    cid = capsys.readouterr().out.strip()

    code = _run(
        tmp_path,
        "sales", "add", "--customer", cid, "--date", "2024-01-01",
        "--item", "Tomato:2:30", "--item", "Onion:1:20",
    )
    assert code == 0
    sale_id = capsys.readouterr().out.strip()

    raw = json.loads((tmp_path / "snapshots" / f"{SALES_SLOT}.json").read_text(encoding="utf-8"))
    assert raw[0]["id"] == sale_id
    assert raw[0]["totalAmount"] == 80

    assert _run(tmp_path, "dashboard", "--today", "2024-01-01") == 0
    out = capsys.readouterr().out
    assert "Today's Sales: ₹80.00" in out
    assert "Most Sold Today: Tomato" in out
    assert "Total Customers: 7" in out

    assert _run(tmp_path, "sales", "list", "--search", "onion") == 0
    assert sale_id in capsys.readouterr().out


def test_validation_errors_exit_2(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert _run(tmp_path, "customers", "add", "Asha", "123") == 2
    assert "Phone must be 10 digits" in capsys.readouterr().err

    assert _run(tmp_path, "sales", "add", "--customer", "1", "--date", "2024-01-01") == 2
    assert "At least one item is required" in capsys.readouterr().err


def test_bad_item_argument(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _run(tmp_path, "sales", "add", "--customer", "1", "--item", "Tomato:two:30")
    assert exc_info.value.code == 2


def test_export_and_qa(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    _run(tmp_path, "sales", "add", "--customer", "1", "--date", "2024-01-01", "--item", "Tomato:2:30")
    capsys.readouterr()

    assert _run(tmp_path, "export", "--start", "2024-01-01", "--end", "2024-01-31") == 0
    assert (tmp_path / "marts" / "mart_sales_2024-01-01_2024-01-31.csv").exists()

    assert _run(tmp_path, "qa") == 0
    assert "Sale total mismatches:  0" in capsys.readouterr().out


@pytest.mark.parametrize("item", ["Tomato:nan:30", "Tomato:2:inf"])
def test_non_finite_item_rejected(tmp_path: Path, item: str) -> None:
    """nan/inf amounts stop at argument parsing and nothing is stored."""
    with pytest.raises(SystemExit) as exc_info:
        _run(tmp_path, "sales", "add", "--customer", "1", "--date", "2024-01-01", "--item", item)
    assert exc_info.value.code == 2
    assert not (tmp_path / "snapshots" / f"{SALES_SLOT}.json").exists()


def test_malformed_snapshot_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """A snapshot with missing fields is an error message, not a traceback."""
    (tmp_path / "snapshots").mkdir()
    (tmp_path / "snapshots" / f"{SALES_SLOT}.json").write_text('[{"id": "x"}]', encoding="utf-8")

    assert _run(tmp_path, "dashboard") == 2
    assert SALES_SLOT in capsys.readouterr().err


def test_edit_customer_and_items(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Customers and sale items can be edited after they are recorded."""
    assert _run(tmp_path, "customers", "update", "1", "Rajesh K", "9000000009") == 0
    assert _run(tmp_path, "customers", "list", "--search", "rajesh k") == 0
    assert "9000000009" in capsys.readouterr().out

    _run(tmp_path, "sales", "add", "--customer", "1", "--date", "2024-01-01", "--item", "Tomato:2:30")
    sale_id = capsys.readouterr().out.strip()

    assert _run(tmp_path, "sales", "add-item", sale_id, "Onion:1:20") == 0
    item_id = capsys.readouterr().out.splitlines()[0]

    assert _run(tmp_path, "sales", "update-item", sale_id, item_id, "Onion:2:20") == 0
    assert "Total: ₹100.00" in capsys.readouterr().out

    assert _run(tmp_path, "sales", "delete-item", sale_id, item_id) == 0
    assert "Total: ₹60.00" in capsys.readouterr().out

    assert _run(tmp_path, "sales", "show", "missing") == 0
    assert "No sale with id missing" in capsys.readouterr().err
