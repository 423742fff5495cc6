from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base


class TransactionType(Base):

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(100), unique=True, nullable=False)

     transactions = relationship("Transaction", back_populates="transaction_type")

     def __repr__(self):
          return f"<TransactionType(id={self.id}, name='{self.name}')>"
