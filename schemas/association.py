from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class AssociationCreate(BaseModel):
     """Request body for POST /associations."""
     property_id: int
     name: str = Field(..., min_length=1, max_length=255)
     contact_info: Optional[str] = Field(None, max_length=255)
     fee: Optional[float] = None
     due_date: Optional[date] = None


class AssociationResponse(AssociationCreate):
     id: int

     model_config = ConfigDict(from_attributes=True)


class BoardMemberCreate(BaseModel):
     """Request body for POST /board-members."""
     association_id: int
     name: str = Field(..., min_length=1, max_length=200)
     email: Optional[str] = Field(None, max_length=255)
     phone: Optional[str] = Field(None, max_length=50)


class BoardMemberResponse(BoardMemberCreate):
     id: int

     model_config = ConfigDict(from_attributes=True)
