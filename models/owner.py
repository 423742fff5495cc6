"""
Owner model - contact profile of a property's owner.

Separate from User: an owner profile carries name and phone and is tied to
one property, while the User row holds the login.
"""
from sqlalchemy import Column, Integer, String, ForeignKey
from .base import Base


class Owner(Base):

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)

     name = Column(String(200), nullable=False)
     email = Column(String(255), nullable=True)
     phone = Column(String(50), nullable=True)

     def __repr__(self):
          return f"<Owner(id={self.id}, name='{self.name}')>"
