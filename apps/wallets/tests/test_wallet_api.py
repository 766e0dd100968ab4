"""API tests for wallet endpoints."""

from __future__ import annotations

from decimal import Decimal
from unittest import mock

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User
from apps.wallets import services
from apps.wallets.models import Wallet


class WalletAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="wallet@example.com", password="StrongPass123")
        self.friend = User.objects.create_user(email="friend@example.com", password="StrongPass123")
        self.client.force_authenticate(self.user)

    def test_requires_authentication(self) -> None:
        self.client.force_authenticate(None)

        response = self.client.get(reverse("wallet-balance"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_balance_creates_wallet(self) -> None:
        response = self.client.get(reverse("wallet-balance"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"balance": Decimal("0.00"), "currency": "USD", "user_id": self.user.id})

    def test_deposit_and_withdraw(self) -> None:
        deposit = self.client.post(reverse("wallet-deposit"), {"amount": "120.00"}, format="json")
        withdraw = self.client.post(reverse("wallet-withdraw"), {"amount": "20.00"}, format="json")

        self.assertEqual(deposit.status_code, status.HTTP_200_OK, deposit.data)
        self.assertEqual(deposit.data["new_balance"], Decimal("120.00"))
        self.assertEqual(deposit.data["amount_deposited"], Decimal("120.00"))
        self.assertEqual(withdraw.status_code, status.HTTP_200_OK, withdraw.data)
        self.assertEqual(withdraw.data["new_balance"], Decimal("100.00"))
        self.assertEqual(withdraw.data["amount_withdrawn"], Decimal("20.00"))

    def test_invalid_amount(self) -> None:
        response = self.client.post(reverse("wallet-deposit"), {"amount": "-3"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("error", response.data)

    def test_withdraw_insufficient_balance(self) -> None:
        response = self.client.post(reverse("wallet-withdraw"), {"amount": "10.00"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"error": "Insufficient balance"})

    def test_unexpected_failure_returns_json_500(self) -> None:
        with mock.patch("apps.wallets.services.record_entry", side_effect=RuntimeError("ledger down")):
            response = self.client.post(reverse("wallet-deposit"), {"amount": "25.00"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.json(), {"error": "Deposit failed: ledger down"})
        self.assertFalse(Wallet.objects.filter(user=self.user).exists())

    def test_transfer(self) -> None:
        services.deposit(self.user, Decimal("80"))

        response = self.client.post(
            reverse("wallet-transfer"),
            {"to_user_id": self.friend.id, "amount": "30.00"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["from_balance"], Decimal("50.00"))
        self.assertEqual(response.data["amount_transferred"], Decimal("30.00"))
        self.assertEqual(response.data["to_user_id"], self.friend.id)
        self.assertEqual(Wallet.objects.get(user=self.friend).balance, Decimal("30.00"))

    def test_transfer_to_unknown_user(self) -> None:
        services.deposit(self.user, Decimal("80"))

        response = self.client.post(
            reverse("wallet-transfer"),
            {"to_user_id": 999999, "amount": "30.00"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"error": "Recipient not found"})
        self.assertEqual(Wallet.objects.get(user=self.user).balance, Decimal("80.00"))

    def test_transfer_to_self(self) -> None:
        services.deposit(self.user, Decimal("80"))

        response = self.client.post(
            reverse("wallet-transfer"),
            {"to_user_id": self.user.id, "amount": "30.00"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"error": "Cannot transfer to yourself"})

    def test_transactions_filtered_by_type(self) -> None:
        services.deposit(self.user, Decimal("80"))
        services.withdraw(self.user, Decimal("5"))

        everything = self.client.get(reverse("wallet-transactions"))
        deposits = self.client.get(reverse("wallet-transactions"), {"type": "deposit"})

        self.assertEqual(
            [entry["type"] for entry in everything.data["transactions"]],
            ["withdrawal", "deposit"],
        )
        self.assertEqual([entry["type"] for entry in deposits.data["transactions"]], ["deposit"])

    def test_transactions_reject_unknown_type(self) -> None:
        response = self.client.get(reverse("wallet-transactions"), {"type": "bogus"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
