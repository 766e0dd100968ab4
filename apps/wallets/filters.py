"""FilterSet definitions for the wallet ledger listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Transaction


class TransactionFilterSet(django_filters.FilterSet):
    type = django_filters.ChoiceFilter(choices=Transaction.Type.choices)
    direction = django_filters.ChoiceFilter(choices=Transaction.Direction.choices)
    created_from = django_filters.DateFilter(field_name="created_at", lookup_expr="date__gte")
    created_to = django_filters.DateFilter(field_name="created_at", lookup_expr="date__lte")

    class Meta:
        model = Transaction
        fields = ["type", "direction"]
