"""Wallet workflows and the ledger primitives they are built on.

Every balance change goes through :func:`credit_wallet` or
:func:`debit_wallet`, which update the locked wallet row and append the
matching :class:`~apps.wallets.models.Transaction` in the caller's atomic
block. Callers must hold the wallet lock (see :func:`lock_wallet`).
"""

from __future__ import annotations

import secrets
from decimal import Decimal
from typing import Any

import structlog
from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import (
    DomainError,
    InsufficientBalance,
    SelfTransfer,
    TransactionAborted,
    ValidationFailed,
)
from shared.domain.value_objects import to_amount

from .domain.events import WalletDeposited, WalletTransferred, WalletWithdrawn
from .models import Transaction, Wallet

logger = structlog.get_logger(__name__)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def positive_amount(value: Any) -> Decimal:
    """Parse a client-supplied amount, rejecting zero, negatives and garbage."""
    try:
        amount = to_amount(value)
    except ValueError:
        raise ValidationFailed("Amount must be a valid number")
    if amount <= 0:
        raise ValidationFailed("Amount must be greater than zero")
    return amount


# ===== Ledger primitives =====

def get_or_create_wallet(user) -> Wallet:
    wallet, created = Wallet.objects.get_or_create(user=user)
    if created:
        logger.info("wallet.created", user_id=user.pk, wallet_id=wallet.pk)
    return wallet


def lock_wallet(user, *, create: bool = False) -> Wallet | None:
    """Return the user's wallet row locked for update, optionally creating it first."""
    if create:
        get_or_create_wallet(user)
    return _lock_queryset_if_possible(Wallet.objects.filter(user=user)).first()


def record_entry(
    wallet: Wallet,
    *,
    type: str,
    direction: str,
    amount: Decimal,
    description: str = "",
    reference_id: str = "",
    metadata: dict | None = None,
) -> Transaction:
    return Transaction.objects.create(
        wallet=wallet,
        type=type,
        direction=direction,
        amount=amount,
        currency=wallet.currency,
        description=description,
        reference_id=reference_id,
        status=Transaction.Status.COMPLETED,
        metadata=metadata or {},
    )


def credit_wallet(wallet: Wallet, amount: Decimal, *, type: str, **entry) -> Transaction:
    wallet.balance += amount
    wallet.save(update_fields=["balance", "updated_at"])
    return record_entry(wallet, type=type, direction=Transaction.Direction.CREDIT, amount=amount, **entry)


def debit_wallet(wallet: Wallet, amount: Decimal, *, type: str, **entry) -> Transaction:
    if wallet.balance < amount:
        raise InsufficientBalance()
    wallet.balance -= amount
    wallet.save(update_fields=["balance", "updated_at"])
    return record_entry(wallet, type=type, direction=Transaction.Direction.DEBIT, amount=amount, **entry)


# ===== Read operations =====

def get_balance(user) -> Wallet:
    """The user's wallet, created with a zero balance on first access."""
    return get_or_create_wallet(user)


def list_transactions(user):
    """Ledger entries of the user's wallet, newest first (empty without a wallet)."""
    return Transaction.objects.filter(wallet__user=user).order_by("-created_at", "-id")


# ===== Workflows =====

def deposit(user, amount: Any) -> Decimal:
    amount = positive_amount(amount)
    log = logger.bind(user_id=user.pk, amount=str(amount))

    try:
        with DjangoUnitOfWork() as uow:
            wallet = lock_wallet(user, create=True)
            entry = credit_wallet(
                wallet,
                amount,
                type=Transaction.Type.DEPOSIT,
                description="Wallet deposit",
            )
            uow.add_event(
                WalletDeposited(
                    aggregate_id=wallet.pk,
                    user_id=user.pk,
                    amount=amount,
                    new_balance=wallet.balance,
                    transaction_id=entry.pk,
                )
            )
    except DomainError:
        raise
    except Exception as exc:
        log.error("wallet.deposit.failed", error=str(exc), exc_info=True)
        raise TransactionAborted(f"Deposit failed: {exc}", cause=exc) from exc

    log.info("wallet.deposit", balance=str(wallet.balance))
    return wallet.balance


def withdraw(user, amount: Any) -> Decimal:
    amount = positive_amount(amount)
    log = logger.bind(user_id=user.pk, amount=str(amount))

    try:
        with DjangoUnitOfWork() as uow:
            wallet = lock_wallet(user)
            if wallet is None or wallet.balance < amount:
                log.info("wallet.withdraw.rejected")
                raise InsufficientBalance()
            entry = debit_wallet(
                wallet,
                amount,
                type=Transaction.Type.WITHDRAWAL,
                description="Wallet withdrawal",
            )
            uow.add_event(
                WalletWithdrawn(
                    aggregate_id=wallet.pk,
                    user_id=user.pk,
                    amount=amount,
                    new_balance=wallet.balance,
                    transaction_id=entry.pk,
                )
            )
    except DomainError:
        raise
    except Exception as exc:
        log.error("wallet.withdraw.failed", error=str(exc), exc_info=True)
        raise TransactionAborted(f"Withdrawal failed: {exc}", cause=exc) from exc

    log.info("wallet.withdraw", balance=str(wallet.balance))
    return wallet.balance


def transfer(from_user, to_user, amount: Any) -> Decimal:
    """Move ``amount`` from one wallet to another; returns the sender's new balance."""
    amount = positive_amount(amount)
    if from_user.pk == to_user.pk:
        raise SelfTransfer()
    log = logger.bind(from_user_id=from_user.pk, to_user_id=to_user.pk, amount=str(amount))

    try:
        with DjangoUnitOfWork() as uow:
            sender = Wallet.objects.filter(user=from_user).first()
            if sender is None:
                raise InsufficientBalance()
            recipient = get_or_create_wallet(to_user)

            # Lock both rows in primary-key order so opposite transfers cannot deadlock
            locked = {
                wallet.pk: wallet
                for wallet in _lock_queryset_if_possible(
                    Wallet.objects.filter(pk__in=[sender.pk, recipient.pk]).order_by("pk")
                )
            }
            sender, recipient = locked[sender.pk], locked[recipient.pk]

            if sender.balance < amount:
                log.info("wallet.transfer.rejected")
                raise InsufficientBalance()

            token = secrets.token_hex(8).upper()
            debit = debit_wallet(
                sender,
                amount,
                type=Transaction.Type.TRANSFER,
                description=f"Transfer to user {to_user.pk}",
                reference_id=f"TRANSFER_OUT_{token}",
                metadata={"counterparty_user_id": to_user.pk},
            )
            credit = credit_wallet(
                recipient,
                amount,
                type=Transaction.Type.TRANSFER,
                description=f"Transfer from user {from_user.pk}",
                reference_id=f"TRANSFER_IN_{token}",
                metadata={"counterparty_user_id": from_user.pk},
            )
            uow.add_event(
                WalletTransferred(
                    aggregate_id=sender.pk,
                    from_user_id=from_user.pk,
                    to_user_id=to_user.pk,
                    amount=amount,
                    reference=token,
                    debit_transaction_id=debit.pk,
                    credit_transaction_id=credit.pk,
                )
            )
    except DomainError:
        raise
    except Exception as exc:
        log.error("wallet.transfer.failed", error=str(exc), exc_info=True)
        raise TransactionAborted(f"Transfer failed: {exc}", cause=exc) from exc

    log.info("wallet.transfer", reference=token)
    return sender.balance
