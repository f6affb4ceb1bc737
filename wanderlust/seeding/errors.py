"""Failures a seed run can end with.

Every seed failure derives from SeedError so entry points can log it once
and terminate without catching unrelated exceptions.
"""

from typing import Optional


class SeedError(Exception):
    pass


class ConfigurationError(SeedError):
    """A setting required for seeding is missing."""


class DatasetError(SeedError):
    """The seed dataset file is missing or malformed."""


class SeedConnectionError(SeedError, ConnectionError):
    """MongoDB is unreachable or refused the credentials."""


class StoreError(SeedError):
    """MongoDB rejected the delete or the batch insert.

    inserted_count is set for batch insert failures: with an ordered insert,
    the records before the failing one are already written.
    """

    def __init__(self, message: str, inserted_count: Optional[int] = None):
        super().__init__(message)
        self.inserted_count = inserted_count
