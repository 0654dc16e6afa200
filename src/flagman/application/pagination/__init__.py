"""Application pagination – list response metadata."""
from flagman.application.pagination.pagination import Pagination

__all__ = ["Pagination"]
