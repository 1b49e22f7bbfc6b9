from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class MealResponse(BaseModel):
    meal_id: str
    name: str
    description: Optional[str]
    price: float
    category: Optional[str]
    image_url: Optional[str]
    is_available: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class MealSeed(BaseModel):
    """Definition of a catalog entry inserted by the seeding routine"""

    name: str
    description: Optional[str] = None
    price: float
    category: Optional[str] = None
    image_url: Optional[str] = None
