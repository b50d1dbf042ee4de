"""
Ledger Service — The single public interface for all stock operations.

Usage:
    from almoxarife import ledger, LedgerError

    entry = ledger.register_inbound_new_item(7, user, name='Toner')
    ledger.register_outbound(2, entry.product, user, unit=unit, sector=sector)
    ledger.list_movements(type='OUT')
    ledger.summarize('week')
"""

from almoxarife.services.movements import LedgerMovements
from almoxarife.services.queries import LedgerQueries
from almoxarife.services.reports import LedgerReports


class Ledger(LedgerMovements, LedgerQueries, LedgerReports):
    """
    Single interface for all ledger operations.

    Parameter convention: (quantity, product, user, ...)
    Follows natural language: "Take 2 toners, by Ana, to Finance/Payroll"

    IMPORTANT: All state-changing methods use atomic transactions
    with row locking on the product. See each method's docstring.
    """
