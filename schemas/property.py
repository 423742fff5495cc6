"""
Pydantic schemas for properties, units and owner profiles.
"""
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models.enums import PropertyStatus, UnitStatus


class PropertyCreate(BaseModel):
     """Request body for POST /properties."""
     owner_id: int = Field(..., description="User ID of the owner (must exist)")
     name: Optional[str] = Field(None, max_length=255)
     address: str = Field(..., min_length=1, max_length=255)
     city: Optional[str] = Field(None, max_length=100)
     state: Optional[str] = Field(None, max_length=50)
     zip: Optional[str] = Field(None, max_length=20)
     value: float = Field(..., description="Assessed property value")
     status: Optional[PropertyStatus] = Field(None, description="active (default) or inactive")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "owner_id": 1,
                    "name": "Main St Property",
                    "address": "123 Main St",
                    "city": "Springfield",
                    "state": "IL",
                    "zip": "62701",
                    "value": 350000.00,
                    "status": "active",
               }
          }
     )


class PropertyResponse(PropertyCreate):
     id: int
     status: PropertyStatus

     model_config = ConfigDict(from_attributes=True)


class UnitCreate(BaseModel):
     """Request body for POST /units. ``status`` defaults to vacant."""
     property_id: int
     unit_number: str = Field(..., min_length=1, max_length=50)
     rent_amount: float
     status: Optional[UnitStatus] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": 1,
                    "unit_number": "1A",
                    "rent_amount": 1500.00,
                    "status": "occupied",
               }
          }
     )


class UnitResponse(BaseModel):
     id: int
     property_id: int
     unit_number: str
     rent_amount: float
     status: UnitStatus

     model_config = ConfigDict(from_attributes=True)


class OwnerCreate(BaseModel):
     """Request body for POST /owners."""
     property_id: int
     name: str = Field(..., min_length=1, max_length=200)
     email: Optional[str] = Field(None, max_length=255)
     phone: Optional[str] = Field(None, max_length=50)


class OwnerResponse(OwnerCreate):
     id: int

     model_config = ConfigDict(from_attributes=True)
