from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from .base import Base, status_type
from .enums import UnitStatus


class Unit(Base):
     """
     Unit model - individual rentable units within a property.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)

     unit_number = Column(String(50), nullable=False)
     rent_amount = Column(Numeric(12, 2), nullable=False)
     status = Column(
          status_type(UnitStatus, "unit_status"),
          default=UnitStatus.VACANT,
          server_default=UnitStatus.VACANT.value,
          nullable=False,
     )

     def __repr__(self):
          return f"<Unit(id={self.id}, unit_number='{self.unit_number}', status='{self.status}')>"
