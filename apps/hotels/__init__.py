"""Hotels app package.

Read-side hotel catalog: hotels, their room types and physical rooms.
A room's ``status`` is advisory only; whether it can be booked for a
date range is decided by the booking availability check.
"""
