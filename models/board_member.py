from sqlalchemy import Column, Integer, String, ForeignKey
from .base import Base


class BoardMember(Base):
     """
     BoardMember model - a seat on an association's board.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     association_id = Column(Integer, ForeignKey("associations.id"), nullable=False, index=True)

     name = Column(String(200), nullable=False)
     email = Column(String(255), nullable=True)
     phone = Column(String(50), nullable=True)

     def __repr__(self):
          return f"<BoardMember(id={self.id}, name='{self.name}')>"
