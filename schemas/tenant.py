"""
Pydantic schemas for tenants and the records hanging off them
(payments and maintenance requests).
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models.enums import PaymentStatus, MaintenanceStatus


class TenantCreate(BaseModel):
     """Request body for POST /tenants."""
     unit_id: int = Field(..., description="Unit ID (must exist)")
     name: str = Field(..., min_length=1, max_length=200)
     email: Optional[str] = Field(None, max_length=255)
     phone: Optional[str] = Field(None, max_length=50)
     lease_start_date: date
     lease_end_date: date
     rent: float

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "unit_id": 1,
                    "name": "John Doe",
                    "email": "john@example.com",
                    "phone": "555-0100",
                    "lease_start_date": "2025-01-01",
                    "lease_end_date": "2025-12-31",
                    "rent": 1500.00,
               }
          }
     )


class TenantResponse(TenantCreate):
     id: int

     model_config = ConfigDict(from_attributes=True)


class PaymentCreate(BaseModel):
     """Request body for POST /payments. ``status`` defaults to pending."""
     tenant_id: int
     amount: float
     payment_date: date
     status: Optional[PaymentStatus] = None


class PaymentResponse(BaseModel):
     id: int
     tenant_id: int
     amount: float
     payment_date: date
     status: PaymentStatus

     model_config = ConfigDict(from_attributes=True)


class MaintenanceCreate(BaseModel):
     """
     Request body for POST /maintenance.

     ``status`` defaults to pending and ``cost`` to 0 when omitted.
     """
     tenant_id: int
     property_id: int
     description: str = Field(..., min_length=1)
     request_date: date
     status: Optional[MaintenanceStatus] = None
     cost: Optional[float] = None
     completion_date: Optional[date] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "tenant_id": 1,
                    "property_id": 1,
                    "description": "Leaking faucet in kitchen",
                    "request_date": "2025-03-01",
                    "status": "in-progress",
               }
          }
     )


class MaintenanceResponse(BaseModel):
     id: int
     tenant_id: int
     property_id: int
     description: str
     request_date: date
     status: MaintenanceStatus
     cost: float
     completion_date: Optional[date] = None

     model_config = ConfigDict(from_attributes=True)
