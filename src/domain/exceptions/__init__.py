from domain.exceptions.catalog_exceptions import (
    BulkSelectCancelledError,
    BulkSelectError,
    DomainError,
    FetchError,
    InvalidPageRequestError,
)

__all__ = [
    "BulkSelectCancelledError",
    "BulkSelectError",
    "DomainError",
    "FetchError",
    "InvalidPageRequestError",
]
