"""User ORM Model"""

from sqlalchemy import Column, Integer, String

from ...db.models import Base


class UserModel(Base):
    # Table and column names match the existing user database
    __tablename__ = 'userDB'

    id = Column(Integer, primary_key=True, index=True)
    username = Column('userName', String(255), unique=True, index=True, nullable=False)
