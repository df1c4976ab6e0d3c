from .ledger import RoundResult, ResultLedger, LEDGER_CAPACITY
from .summary import TableRow, BreakdownItem, table_view, breakdown_view, timing_summary

__all__ = [
    "RoundResult", "ResultLedger", "LEDGER_CAPACITY",
    "TableRow", "BreakdownItem", "table_view", "breakdown_view", "timing_summary",
]
