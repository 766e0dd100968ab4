"""Wallets app package.

One wallet per user plus an append-only ledger of transactions. Balances
change only through the ledger primitives in ``services`` so that every
balance mutation is matched by exactly one ledger entry in the same
database transaction.
"""
