"""User repository implementation"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...domain.exceptions import PersistenceUnavailable
from ...domain.repositories.user_repository import IUserRepository
from ..orm.user_model import UserModel

logger = logging.getLogger(__name__)


class UserRepositoryImpl(IUserRepository):
    """Read-only access to the user table"""

    def __init__(self, session: Session):
        self.session = session

    def exists_by_username(self, username: str) -> bool:
        """Check if a user with this exact username exists"""
        try:
            return self.session.query(UserModel.id).filter(UserModel.username == username).first() is not None
        except SQLAlchemyError as e:
            logger.error("Error querying database: %s", e)
            raise PersistenceUnavailable("User database is unavailable") from e
