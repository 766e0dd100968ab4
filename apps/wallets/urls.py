"""URL routing for the wallet domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    WalletBalanceView,
    WalletDepositView,
    WalletTransactionsView,
    WalletTransferView,
    WalletWithdrawView,
)

urlpatterns = [
    path("balance/", WalletBalanceView.as_view(), name="wallet-balance"),
    path("deposit/", WalletDepositView.as_view(), name="wallet-deposit"),
    path("withdraw/", WalletWithdrawView.as_view(), name="wallet-withdraw"),
    path("transfer/", WalletTransferView.as_view(), name="wallet-transfer"),
    path("transactions/", WalletTransactionsView.as_view(), name="wallet-transactions"),
]
