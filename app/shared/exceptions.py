# app/shared/exceptions.py
"""
Error taxonomy shared by the record store, chat proxy and routes.
Routes collapse everything except BadRequestError into a generic 500.
"""


class ClinicBackendError(Exception):
    """Base class for all backend errors."""


class RecordStoreError(ClinicBackendError):
    """A collection file could not be used."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")


class ReadError(RecordStoreError):
    """Collection file is missing or unreadable."""


class ParseError(RecordStoreError):
    """Collection file does not contain valid JSON."""


class BadRequestError(ClinicBackendError):
    """A required request field is missing."""


class UpstreamError(ClinicBackendError):
    """The completion service call failed."""
