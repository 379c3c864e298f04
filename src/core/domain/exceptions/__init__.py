"""Custom exception hierarchy for Docshelf.

Indexing errors are logged and skipped by the tree indexer, configuration
errors stop the CLI, and validation errors become HTTP 400 responses.

    from src.core.domain.exceptions import DocshelfError, DocumentLoadError
"""

# Base classes
from .base import DocshelfError, RaiseSite

# Configuration exceptions
from .configuration import ConfigurationError, DocsRootNotFoundError

# Indexing exceptions
from .indexing import DirectoryReadError, DocumentLoadError, IndexingError

# Validation exceptions
from .validation import InvalidResourceURIError, ValidationError

__all__ = [
    # Base
    "RaiseSite",
    "DocshelfError",
    # Configuration
    "ConfigurationError",
    "DocsRootNotFoundError",
    # Indexing
    "IndexingError",
    "DocumentLoadError",
    "DirectoryReadError",
    # Validation
    "ValidationError",
    "InvalidResourceURIError",
]
