"""
Finance Dashboard
-----------------

A small personal-finance service: a JSON-file backed transaction ledger,
a dashboard summary derived from it, and a client that renders both.
"""

__version__ = '0.1.0'
__license__ = 'MIT'

from . import ledger
from . import dashboard
from . import gateway
from . import categories
from . import services

from .ledger import LedgerStore
from .gateway import TransactionGateway
from .dashboard import (
    build_dashboard,
    calculate_balance,
    calculate_spending_pattern,
    forecast_message
)
from .categories import (
    infer_category,
    translate_category,
    translate_spending_pattern
)
