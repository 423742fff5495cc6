from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey
from .base import Base


class Association(Base):
     """
     Association model - the HOA a property belongs to.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)

     name = Column(String(255), nullable=False)
     contact_info = Column(String(255), nullable=True)
     fee = Column(Numeric(12, 2), nullable=True)
     due_date = Column(Date, nullable=True)

     def __repr__(self):
          return f"<Association(id={self.id}, name='{self.name}')>"
