"""Serializers for wallet requests and ledger entries."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from .models import Transaction, Wallet


class WalletSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Wallet
        fields = ["balance", "currency", "user_id"]
        read_only_fields = fields


class TransactionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Transaction
        fields = [
            "id",
            "type",
            "direction",
            "amount",
            "currency",
            "description",
            "reference_id",
            "status",
            "metadata",
            "created_at",
        ]
        read_only_fields = fields


class AmountSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0.01"))


class TransferSerializer(AmountSerializer):
    to_user_id = serializers.IntegerField(min_value=1)
