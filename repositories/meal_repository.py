"""
Meal Repository - Data access layer for the meal catalog
"""

from typing import Iterable, List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_available(self) -> List[Meal]:
        """Get all orderable meals, newest first"""
        return (
            self.db.query(Meal)
            .filter(Meal.is_available.is_(True))
            .order_by(Meal.created_at.desc())
            .all()
        )

    def get_by_ids(self, meal_ids: Iterable[str]) -> List[Meal]:
        """Get the meals matching the given IDs (missing IDs are simply absent)"""
        meal_ids = list(meal_ids)
        if not meal_ids:
            return []
        return self.db.query(Meal).filter(Meal.meal_id.in_(meal_ids)).all()

    def add_many(self, meals: List[Meal]) -> List[Meal]:
        """Insert several meals in one transaction"""
        self.db.add_all(meals)
        self.db.commit()
        return meals
