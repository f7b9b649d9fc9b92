"""
Domain exceptions shared across layers.
Adapters translate library-specific errors (httpx, JSON decoding) into these so
the application layer never catches infrastructure exception types.
"""


class DeliveryError(Exception):
    """A chat request could not be delivered to the backend or got a bad reply."""


class CompletionResponseError(ValueError):
    """The completion service answered with a payload we cannot extract text from."""
