"""QA module for ledger consistency.

Example:
    >>> from vendor_core.qa import run_ledger_qa
    >>>
    >>> result = run_ledger_qa(ledger.records, registry.customers)
    >>> print(result.summary)
    >>> if result.orphan_sales is not None:
    ...     print(result.orphan_sales)

"""

from vendor_core.qa.api import LedgerQAResult, run_ledger_qa

__all__ = ["LedgerQAResult", "run_ledger_qa"]
