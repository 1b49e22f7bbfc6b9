"""
Base repository interface for data access layer.
Repositories keep SQLAlchemy queries out of the service layer.
"""

from typing import Generic, TypeVar, Type
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository holding the session and the mapped model.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def count(self) -> int:
        return self.db.query(self.model).count()
