"""Application sync – the reconciliation engine."""
from flagman.application.sync.aggregator import PageAggregator
from flagman.application.sync.executor import BatchExecutor
from flagman.application.sync.reconciler import Reconciler

__all__ = ["BatchExecutor", "PageAggregator", "Reconciler"]
