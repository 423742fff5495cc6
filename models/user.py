from sqlalchemy import Column, Integer, String, DateTime, func
from .base import Base, status_type
from .enums import UserRole


class User(Base):
     """
     User model - login accounts for owners, managers and tenants.
     Property.owner_id points here.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)  # bcrypt hash
     role = Column(status_type(UserRole, "user_role"), nullable=False)
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
