"""Admin registration for wallets and the ledger."""

from __future__ import annotations

from django.contrib import admin

from .models import Transaction, Wallet


class TransactionInline(admin.TabularInline):
    model = Transaction
    extra = 0
    can_delete = False
    readonly_fields = (
        "type",
        "direction",
        "amount",
        "currency",
        "description",
        "reference_id",
        "status",
        "created_at",
    )

    def has_add_permission(self, request, obj=None):  # type: ignore
        return False


@admin.register(Wallet)
class WalletAdmin(admin.ModelAdmin):
    list_display = ("user", "balance", "currency", "updated_at")
    search_fields = ("user__email",)
    readonly_fields = ("balance", "created_at", "updated_at")
    inlines = [TransactionInline]


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ("reference_id", "wallet", "type", "direction", "amount", "status", "created_at")
    list_filter = ("type", "direction", "status")
    search_fields = ("reference_id", "wallet__user__email")

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False
