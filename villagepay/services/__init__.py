"""
High-level use cases for the Village Pay API.

Each service orchestrates a document store to implement the business rules
(first-time PIN setup, login, payment review, account settings). Routers call
these services instead of touching the JSON document directly.
"""
