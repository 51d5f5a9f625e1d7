"""Service layer for orchestrating business logic."""

from bibmerge.services.lookup import BookLookupService

__all__ = [
    "BookLookupService",
]
