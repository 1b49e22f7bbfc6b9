"""Meal catalog routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db
from api.responses import error_responses
from domain.mappers import MealMapper
from domain.schemas.meal_schemas import MealResponse
from services.catalog_service import CatalogService

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("foodorder.api.meals")


@router.get("", response_model=List[MealResponse], responses=error_responses(500))
def list_meals(db: Session = Depends(get_db)):
    """List the meals that can currently be ordered, newest first."""
    meals = CatalogService.list_available_meals(db)
    return [MealMapper.to_response(m) for m in meals]
