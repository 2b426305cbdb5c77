from .supplier import SupplierRecord
from .coffee import CoffeeRecord, PriceRange

__all__ = ["SupplierRecord", "CoffeeRecord", "PriceRange"]
