"""User repository interface"""

from abc import ABC, abstractmethod


class IUserRepository(ABC):

    @abstractmethod
    def exists_by_username(self, username: str) -> bool:
        """Raise PersistenceUnavailable if the backend cannot answer."""
        pass
