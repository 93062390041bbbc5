"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class AnalyticsError(Exception):
    """Base class for errors raised by the analytics engine."""

    pass


class RepositoryError(AnalyticsError):
    """Error fetching a snapshot from the persistence layer.

    Raised by repository adapters when the backing store is unreachable,
    denies access, or returns a malformed response. Analytics are never
    computed from a snapshot whose fetch raised this error.
    """

    pass
