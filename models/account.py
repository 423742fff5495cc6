from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class Account(Base):
     """
     Account model - a named ledger account, e.g. "Rent Income".
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     account_type_id = Column(Integer, ForeignKey("account_types.id"), nullable=False, index=True)
     name = Column(String(255), nullable=False)

     # Relationships
     account_type = relationship("AccountType", back_populates="accounts", lazy="selectin")
     transactions = relationship("Transaction", back_populates="account")

     def __repr__(self):
          return f"<Account(id={self.id}, name='{self.name}')>"
