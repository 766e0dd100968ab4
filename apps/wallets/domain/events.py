"""
Wallet Domain Events

Published after the wallet transaction commits.
"""

from dataclasses import dataclass
from decimal import Decimal

from shared.domain.base import DomainEvent


@dataclass
class WalletDeposited(DomainEvent):
    user_id: int
    amount: Decimal
    new_balance: Decimal
    transaction_id: int


@dataclass
class WalletWithdrawn(DomainEvent):
    user_id: int
    amount: Decimal
    new_balance: Decimal
    transaction_id: int


@dataclass
class WalletTransferred(DomainEvent):
    """Money moved between two wallets; both ledger entries share ``reference``."""
    from_user_id: int
    to_user_id: int
    amount: Decimal
    reference: str
    debit_transaction_id: int
    credit_transaction_id: int
