"""
Declarative base shared by every table.
"""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

Base = declarative_base()


class BaseModel(Base):
    """Abstract parent that gives each table an autoincrement integer ``id``."""

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"
