"""
Shared Kernel

Base classes and utilities shared by the hotel, booking and wallet contexts:
domain events, value objects, the error taxonomy, the unit of work and the
message bus that publishes events after commit.
"""
