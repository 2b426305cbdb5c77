from sqlalchemy import Column, Integer, String, Float, ForeignKey, CheckConstraint, text
from ..core.db import Base

class Coffee(Base):
    __tablename__ = "COFFEES"

    name   = Column("COF_NAME", String(200), primary_key=True)
    sup_id = Column("SUP_ID",   Integer, ForeignKey("SUPPLIERS.SUP_ID", name="SUP_FK"), nullable=False)
    price  = Column("PRICE",    Float,   nullable=False)
    sales  = Column("SALES",    Integer, nullable=False, default=0, server_default=text("0"))
    total  = Column("TOTAL",    Integer, nullable=False, default=0, server_default=text("0"))

    __table_args__ = (
        CheckConstraint('"PRICE" >= 0', name="CK_Coffee_Price_NonNeg"),
    )

    # No relationship(): joins go through coffeeshop.queries.join
