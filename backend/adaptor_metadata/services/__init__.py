"""
Backend services for adaptor metadata.
"""

from adaptor_metadata.services.metadata_loader import (
    HostContext,
    MetadataLoaderService,
    load_metadata,
)

__all__ = ["HostContext", "MetadataLoaderService", "load_metadata"]
