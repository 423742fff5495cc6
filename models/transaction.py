"""
Transaction model - one ledger entry.

Every entry is booked against an account, classified by a transaction type
and assigned to a property.
"""
from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class Transaction(Base):

     id = Column(Integer, primary_key=True, autoincrement=True)
     account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
     transaction_type_id = Column(Integer, ForeignKey("transaction_types.id"), nullable=False, index=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)

     amount = Column(Numeric(12, 2), nullable=False)
     date = Column(Date, nullable=False)
     description = Column(String(255), nullable=True)

     # Parents load with the row; listings embed them
     account = relationship("Account", back_populates="transactions", lazy="selectin")
     transaction_type = relationship("TransactionType", back_populates="transactions", lazy="selectin")
     property = relationship("Property", back_populates="transactions", lazy="selectin")

     def __repr__(self):
          return f"<Transaction(id={self.id}, amount={self.amount}, date={self.date})>"
