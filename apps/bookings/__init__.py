"""Bookings app package.

Room bookings paid from the guest's wallet. Creating a booking locks the
room, re-checks availability, debits the wallet and records the ledger
entry in one database transaction; cancelling refunds the full amount the
same way. Date ranges are half-open, so a check-out day may be the next
guest's check-in day.
"""
