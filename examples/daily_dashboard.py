"""Example: record a day's sales and print the dashboard

This example uses the VendorApp facade to add a customer, record two sales,
edit a line item, and show how the stored totals follow the edit.

Prerequisites:
- None. Snapshots are written under data/ (created if missing).
"""

from dataclasses import replace
from pathlib import Path

from vendor_core import StoragePaths, VendorApp
from vendor_core.formatters import format_dashboard

today = "2024-01-01"  # MODIFY AS NEEDED

paths = StoragePaths.from_root(Path("data"))
app = VendorApp.from_paths(paths)

cid = app.add_customer("Asha Rao", "9000000001", address="Stall 4")
sale_id = app.record_sale(today, cid, [("Tomato", 2, 30), ("Onion", 1, 20)])
app.record_sale(today, "1", [("Tomato", 1.5, 30)])

sale = app.ledger.get_by_id(sale_id)
print(f"Sale {sale.id}: {len(sale.items)} items, total {app.display.money(sale.total_amount)}")

# Change the onion weight; item and sale totals are recomputed.
onion = sale.items[1]
app.ledger.update_item(sale_id, replace(onion, weight=2.5))
sale = app.ledger.get_by_id(sale_id)
print(f"After edit: total {app.display.money(sale.total_amount)}")

print()
print(format_dashboard(app.dashboard(today=today), app.display))
