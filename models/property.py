from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base, status_type
from .enums import PropertyStatus


class Property(Base):
     """
     Property model - a building or lot owned by a user with role 'owner'.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
     name = Column(String(255), nullable=True)

     # Address
     address = Column(String(255), nullable=False)
     city = Column(String(100), nullable=True)
     state = Column(String(50), nullable=True)
     zip = Column(String(20), nullable=True)

     value = Column(Numeric(12, 2), nullable=False)
     status = Column(
          status_type(PropertyStatus, "property_status"),
          default=PropertyStatus.ACTIVE,
          server_default=PropertyStatus.ACTIVE.value,
          nullable=False,
     )

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     transactions = relationship("Transaction", back_populates="property")

     def __repr__(self):
          return f"<Property(id={self.id}, address='{self.address}')>"
