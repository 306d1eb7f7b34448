from .ledger_serializers import (
    LogEntrySerializer,
    LogEntryCreateSerializer,
    RedemptionSerializer,
    RedemptionCreateSerializer,
    BalanceSerializer,
)

__all__ = [
    'LogEntrySerializer',
    'LogEntryCreateSerializer',
    'RedemptionSerializer',
    'RedemptionCreateSerializer',
    'BalanceSerializer',
]
