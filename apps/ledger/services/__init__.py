from .balance_service import BalanceService
from .ledger_service import LedgerService

__all__ = [
    'BalanceService',
    'LedgerService',
]
