"""
Exceptions raised by the adaptor metadata package.
"""


class AdaptorMetadataError(Exception):
    """Base class for adaptor metadata errors."""


class MalformedTreeShapeError(AdaptorMetadataError, TypeError):
    """
    A metadata tree does not have the expected shape.

    Raised when a ``children`` value is neither a sequence nor a mapping of
    sequences, or when a child cannot be ordered by name. Metadata comes from
    trusted host code, so this points to an upstream defect and is never
    recovered from.
    """
