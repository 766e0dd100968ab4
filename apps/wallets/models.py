"""Wallet and ledger models."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.db.models import Case, F, Sum, When  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


def default_currency() -> str:
    return settings.WALLET_DEFAULT_CURRENCY


class Wallet(models.Model):
    """A user's spendable balance."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="wallet",
    )
    balance = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    currency = models.CharField(max_length=3, default=default_currency)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Wallet")
        verbose_name_plural = _("Wallets")
        constraints = [
            models.CheckConstraint(
                condition=models.Q(balance__gte=0),
                name="wallet_balance_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"Wallet {self.user_id}: {self.balance} {self.currency}"

    def ledger_balance(self) -> Decimal:
        """Signed sum of completed ledger entries; equals ``balance`` when consistent."""
        total = self.transactions.filter(status=Transaction.Status.COMPLETED).aggregate(
            total=Sum(
                Case(
                    When(direction=Transaction.Direction.CREDIT, then=F("amount")),
                    default=-F("amount"),
                    output_field=models.DecimalField(max_digits=14, decimal_places=2),
                )
            )
        )["total"]
        return total or Decimal("0.00")


class Transaction(models.Model):
    """Immutable ledger entry recorded alongside every balance change."""

    class Type(models.TextChoices):
        DEPOSIT = "deposit", _("Deposit")
        WITHDRAWAL = "withdrawal", _("Withdrawal")
        TRANSFER = "transfer", _("Transfer")
        BOOKING_PAYMENT = "booking_payment", _("Booking payment")
        REFUND = "refund", _("Refund")

    class Direction(models.TextChoices):
        CREDIT = "credit", _("Credit")
        DEBIT = "debit", _("Debit")

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        COMPLETED = "completed", _("Completed")
        FAILED = "failed", _("Failed")
        CANCELLED = "cancelled", _("Cancelled")

    wallet = models.ForeignKey(Wallet, on_delete=models.CASCADE, related_name="transactions")
    type = models.CharField(max_length=20, choices=Type.choices)
    direction = models.CharField(max_length=6, choices=Direction.choices)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    currency = models.CharField(max_length=3, default=default_currency)
    description = models.CharField(max_length=255, blank=True)
    reference_id = models.CharField(max_length=64, blank=True, db_index=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.COMPLETED)
    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Transaction")
        verbose_name_plural = _("Transactions")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount__gt=0),
                name="transaction_amount_positive",
            ),
        ]
        indexes = [
            models.Index(fields=["wallet", "type"], name="transaction_wallet_type_idx"),
        ]

    def __str__(self) -> str:
        sign = "+" if self.direction == self.Direction.CREDIT else "-"
        return f"{self.type} {sign}{self.amount} ({self.reference_id or self.pk})"

    def save(self, *args, **kwargs):  # type: ignore
        if not self._state.adding:
            raise ValueError("Ledger entries are immutable")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):  # type: ignore
        raise ValueError("Ledger entries cannot be deleted")
