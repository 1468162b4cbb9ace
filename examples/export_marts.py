"""Example: export CSV marts and run ledger QA

Writes the sales, item-line, daily and vegetable marts for a month and prints
the QA summary for the stored ledger.

Prerequisites:
- A data/ directory populated by the CLI or by daily_dashboard.py
"""

from pathlib import Path

from vendor_core import StoragePaths, VendorApp
from vendor_core.formatters import format_qa
from vendor_core.sales.marts import daily_totals, export_marts, vegetable_summary

start = "2024-01-01"  # MODIFY AS NEEDED
end = "2024-01-31"  # MODIFY AS NEEDED

paths = StoragePaths.from_root(Path("data"))
app = VendorApp.from_paths(paths)

print(f"Daily totals {start} to {end}:")
print(daily_totals(app.sales, start, end))

print("\nVegetables by number of sales:")
print(vegetable_summary(app.sales, start, end).head())

written = export_marts(paths, app.sales, start, end)
for name, path in written.items():
    print(f"{name}: {path}")

print()
print(format_qa(app.qa()))
