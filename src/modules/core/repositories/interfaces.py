"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T, K]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on the document store directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class IRepository(ABC, Generic[T, K]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``) and ``K`` the application-level key it
    is looked up by.
    """

    @abstractmethod
    def get_by_id(self, id: K) -> Optional[T]:
        """Retrieve an entity by its application-level key."""

    @abstractmethod
    def list(self) -> List[T]:
        """List every entity."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> T:
        """Persist a new entity built from ``data``."""

    @abstractmethod
    def update(self, id: K, changes: Dict[str, Any]) -> Optional[T]:
        """Apply ``changes`` to the entity keyed by ``id``; ``None`` if absent."""

    @abstractmethod
    def delete(self, id: K) -> int:
        """Remove the entity keyed by ``id``; returns how many were removed."""
