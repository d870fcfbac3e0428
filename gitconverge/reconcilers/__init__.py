"""Convergence of declared resources against the git server."""

from gitconverge.reconcilers.base import REQUEUE_DELAY, ReconcileResult
from gitconverge.reconcilers.repository import RepositoryReconciler
from gitconverge.reconcilers.token import TokenReconciler

__all__ = [
    "REQUEUE_DELAY",
    "ReconcileResult",
    "RepositoryReconciler",
    "TokenReconciler",
]
