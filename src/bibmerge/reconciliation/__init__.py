"""Reconciliation of catalog responses into canonical book records."""

from bibmerge.reconciliation.reconciler import (
    PrimaryEmpty,
    PrimaryFound,
    PrimarySelection,
    Reconciler,
    select_primary,
)

__all__ = [
    "PrimaryEmpty",
    "PrimaryFound",
    "PrimarySelection",
    "Reconciler",
    "select_primary",
]
