from decimal import Decimal
from typing import List, Sequence
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealSeed
from repositories import MealRepository
from app.exceptions import StorageUnavailableError

logger = logging.getLogger("foodorder.catalog")


DEFAULT_MEALS: List[MealSeed] = [
    MealSeed(
        name="Classic Cheeseburger",
        description="Juicy beef patty with melted cheese, lettuce, and tomato",
        price=12.99,
        category="Burgers",
        image_url="/images/cheeseburger.jpg",
    ),
    MealSeed(
        name="Margherita Pizza",
        description="Traditional pizza with fresh mozzarella, tomatoes, and basil",
        price=14.50,
        category="Pizzas",
        image_url="/images/margherita.jpg",
    ),
    MealSeed(
        name="Caesar Salad",
        description="Crisp romaine lettuce, croutons, parmesan, and Caesar dressing",
        price=9.99,
        category="Salads",
        image_url="/images/caesar-salad.jpg",
    ),
    MealSeed(
        name="Grilled Salmon",
        description="Fresh salmon fillet with herb butter and seasonal vegetables",
        price=18.99,
        category="Seafood",
        image_url="/images/salmon.jpg",
    ),
    MealSeed(
        name="Chicken Alfredo Pasta",
        description="Creamy alfredo sauce with grilled chicken over fettuccine",
        price=15.50,
        category="Pasta",
        image_url="/images/chicken-alfredo.jpg",
    ),
]


class CatalogService:
    """Read access to the meal catalog"""

    @staticmethod
    def list_available_meals(db: Session) -> List[Meal]:
        """
        Return the meals that can currently be ordered, newest first.

        Raises:
            StorageUnavailableError: If the database cannot be queried
        """
        try:
            meals = MealRepository(db).get_available()
        except SQLAlchemyError:
            logger.exception("Meals fetch error")
            raise StorageUnavailableError()

        logger.debug(f"meals_listed count={len(meals)}")
        return meals

    @staticmethod
    def seed_meals(db: Session, meals: Sequence[MealSeed] = DEFAULT_MEALS) -> int:
        """
        Insert the given meals if the catalog is empty.

        Returns:
            Number of meals inserted (0 when the catalog was already populated)
        """
        meal_repo = MealRepository(db)
        if meal_repo.count() > 0:
            logger.info("Meals already seeded")
            return 0

        rows = [
            Meal(
                name=m.name,
                description=m.description,
                price=Decimal(str(m.price)),
                category=m.category,
                image_url=m.image_url,
                is_available=True,
            )
            for m in meals
        ]
        try:
            meal_repo.add_many(rows)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Meal seeding error")
            raise StorageUnavailableError()

        logger.info(f"Seeded {len(rows)} meals")
        return len(rows)
