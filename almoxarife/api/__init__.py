"""REST endpoints for the ledger (Django REST framework)."""
