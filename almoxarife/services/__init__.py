"""
Ledger services — modular organization of ledger operations.

    from almoxarife.services import LedgerMovements, LedgerQueries, LedgerReports
"""

from almoxarife.services.movements import LedgerEntry, LedgerMovements
from almoxarife.services.queries import LedgerQueries
from almoxarife.services.reports import LedgerReports

__all__ = [
    'LedgerEntry',
    'LedgerMovements',
    'LedgerQueries',
    'LedgerReports',
]
