"""Fatal errors of the catalog ingestion pipeline.

Anything raised from here aborts the whole run. Narrower failures
(one page, one trailer, one credits lookup) never surface as exceptions.
"""


class IngestionError(Exception):
    """Base exception for fatal ingestion failures."""

    pass


class ProviderUnavailableError(IngestionError):
    """Raised when not a single discovery page could be fetched."""

    pass


class IngestionAlreadyRunningError(IngestionError):
    """Raised when another catalog refresh holds the refresh lock."""

    pass


class CatalogWriteError(IngestionError):
    """Raised when the catalog could not be replaced in the store."""

    pass
