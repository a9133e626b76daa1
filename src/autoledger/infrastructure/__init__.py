"""Infrastructure layer implementations."""

from autoledger.infrastructure import storage

__all__ = ["storage"]
