"""Repository base shared by the per-entity repositories."""

from .base import Repository

__all__ = ["Repository"]
