"""Application layer – flag model, pagination and the reconciliation engine."""
