# Adaptor Metadata
"""
Adaptor metadata loading and normalization.

This package retrieves adaptor metadata trees (DHIS2, Salesforce, ...) from a
host environment through a one-shot event exchange and orders them
deterministically for suggestion UIs.

Architecture:
- Metadata Loader Service: request/response exchange with the host context
- Tree Sort: post-order alphabetical normalization of metadata trees
- Adaptor Name: short adaptor names from versioned package specifiers
"""

__version__ = "1.0.0"
