"""
Generic repository port (interface).

This defines the persistence contract shared by every catalog entity.
Each entity declares its own port parametrized with its entity type,
and each port has one concrete implementation in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

EntityT = TypeVar("EntityT")


class Repository(ABC, Generic[EntityT]):
    """
    Abstract repository for catalog entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def save(self, entity: EntityT) -> EntityT:
        """
        Insert a new entity or update an existing one.

        Args:
            entity: Entity to save. An entity without an id is inserted.

        Returns:
            Saved entity with its id populated
        """
        pass

    @abstractmethod
    def find_by_id(self, entity_id: int) -> Optional[EntityT]:
        """
        Find an entity by ID.

        Args:
            entity_id: Entity id

        Returns:
            Entity or None if not found
        """
        pass

    @abstractmethod
    def find_all(self) -> List[EntityT]:
        """
        List all entities in storage order.

        Returns:
            List of entities
        """
        pass

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        """
        Check if an entity with the given name exists.

        Args:
            name: Exact name to look for

        Returns:
            True if such an entity exists, False otherwise
        """
        pass

    @abstractmethod
    def delete_by_id(self, entity_id: int) -> None:
        """
        Delete an entity by ID. Deleting an absent id is a no-op.

        Args:
            entity_id: Entity id
        """
        pass
