"""
Service layer abstraction.

Services encapsulate the business logic and keep API handlers thin.
The in‑memory store used here can be swapped for a database without
changing the handlers.
"""
