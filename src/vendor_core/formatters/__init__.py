"""Output formatters for vendor data."""

from vendor_core.formatters.console import (
    format_customers,
    format_dashboard,
    format_qa,
    format_sale_detail,
    format_sales,
)

__all__ = [
    "format_customers",
    "format_dashboard",
    "format_qa",
    "format_sale_detail",
    "format_sales",
]
