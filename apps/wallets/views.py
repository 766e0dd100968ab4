"""API views for the user's wallet."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import permissions  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.api import domain_error_response, error_response, invalid_input_response
from shared.domain.exceptions import DomainError

from . import services
from .filters import TransactionFilterSet
from .serializers import AmountSerializer, TransactionSerializer, TransferSerializer, WalletSerializer

User = get_user_model()


class WalletBalanceView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):  # type: ignore
        wallet = services.get_balance(request.user)
        return Response(WalletSerializer(wallet).data)


class WalletDepositView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):  # type: ignore
        serializer = AmountSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)
        amount = serializer.validated_data["amount"]
        try:
            new_balance = services.deposit(request.user, amount)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(
            {
                "message": "Deposit successful",
                "new_balance": new_balance,
                "amount_deposited": amount,
            }
        )


class WalletWithdrawView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):  # type: ignore
        serializer = AmountSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)
        amount = serializer.validated_data["amount"]
        try:
            new_balance = services.withdraw(request.user, amount)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(
            {
                "message": "Withdrawal successful",
                "new_balance": new_balance,
                "amount_withdrawn": amount,
            }
        )


class WalletTransferView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):  # type: ignore
        serializer = TransferSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)
        amount = serializer.validated_data["amount"]
        to_user_id = serializer.validated_data["to_user_id"]

        recipient = User.objects.filter(pk=to_user_id).first()
        if recipient is None:
            return error_response("Recipient not found")

        try:
            from_balance = services.transfer(request.user, recipient, amount)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(
            {
                "message": "Transfer successful",
                "amount_transferred": amount,
                "from_balance": from_balance,
                "to_user_id": recipient.pk,
            }
        )


class WalletTransactionsView(APIView):
    """Ledger of the current user's wallet, newest first."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):  # type: ignore
        queryset = services.list_transactions(request.user)
        filterset = TransactionFilterSet(request.query_params, queryset=queryset)
        if not filterset.is_valid():
            return error_response("Invalid filter", details=filterset.errors)
        data = TransactionSerializer(filterset.qs, many=True).data
        return Response({"transactions": data})
