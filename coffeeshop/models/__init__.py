from .supplier import Supplier
from .coffee import Coffee

# Mapped columns in record field order
SUPPLIER_PROJECTION = (Supplier.id, Supplier.name, Supplier.street, Supplier.city, Supplier.state, Supplier.zip)
COFFEE_PROJECTION = (Coffee.name, Coffee.sup_id, Coffee.price, Coffee.sales, Coffee.total)

__all__ = ["Supplier", "Coffee", "SUPPLIER_PROJECTION", "COFFEE_PROJECTION"]
