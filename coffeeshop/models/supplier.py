from sqlalchemy import Column, Integer, String
from ..core.db import Base

class Supplier(Base):
    __tablename__ = "SUPPLIERS"

    # Caller supplies the id, no autoincrement
    id     = Column("SUP_ID",   Integer, primary_key=True, autoincrement=False)
    name   = Column("SUP_NAME", String(200), nullable=False)
    street = Column("STREET",   String(200), nullable=False)
    city   = Column("CITY",     String(100), nullable=False)
    state  = Column("STATE",    String(20),  nullable=False)
    zip    = Column("ZIP",      String(20),  nullable=False)
