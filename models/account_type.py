from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base


class AccountType(Base):
     """
     AccountType model - ledger account category (Asset, Liability, Income, Expense).
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(100), unique=True, nullable=False)

     accounts = relationship("Account", back_populates="account_type")

     def __repr__(self):
          return f"<AccountType(id={self.id}, name='{self.name}')>"
