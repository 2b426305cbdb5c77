# coffeeshop/schemas/supplier.py
from pydantic import BaseModel, ConfigDict

class SupplierRecord(BaseModel):
    # Field order == SUPPLIERS column order
    id: int
    name: str
    street: str
    city: str
    state: str
    zip: str
    model_config = ConfigDict(from_attributes=True, frozen=True)
