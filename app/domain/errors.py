# app/domain/errors.py


class CatalogError(Exception):
    """Base class for catalog failures. The message is the raw upstream error text."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CatalogReadError(CatalogError):
    """Store or cache unavailable while listing products."""

    status_code = 500


class CatalogWriteError(CatalogError):
    """Product could not be inserted; reported as a client fault."""

    status_code = 400
