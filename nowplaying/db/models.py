"""Database base"""

from sqlalchemy.orm import declarative_base

# Keep Base for ORM models
Base = declarative_base()

# NOTE: model classes live in infrastructure/orm/ so that this module has no
# imports of them and no circular dependencies.
