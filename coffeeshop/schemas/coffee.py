# coffeeshop/schemas/coffee.py
from pydantic import BaseModel, ConfigDict, Field

class CoffeeRecord(BaseModel):
    # Field order == COFFEES column order
    name: str = Field(..., min_length=1)
    sup_id: int
    price: float = Field(..., ge=0)
    sales: int = 0
    total: int = 0
    model_config = ConfigDict(from_attributes=True, frozen=True)

class PriceRange(BaseModel):
    min: float | None
    max: float | None
