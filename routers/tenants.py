"""
Tenant, payment and maintenance-request routes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from models import Maintenance, Payment, Tenant
from routers.records import create_record, list_records
from schemas.tenant import (
     MaintenanceCreate,
     MaintenanceResponse,
     PaymentCreate,
     PaymentResponse,
     TenantCreate,
     TenantResponse,
)

router = APIRouter(prefix="/tenants", tags=["tenants"])
payments_router = APIRouter(prefix="/payments", tags=["payments"])
maintenance_router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.get("", response_model=List[TenantResponse], summary="List tenants")
def list_tenants(db: Session = Depends(get_session)):
     return list_records(db, Tenant)


@router.post(
     "",
     response_model=TenantResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a tenant",
)
def create_tenant(body: TenantCreate, db: Session = Depends(get_session)):
     """
     Create a tenant in an existing unit.

     The store rejects an unknown **unit_id** and a lease that ends before it starts.
     """
     return create_record(db, Tenant, body)


@payments_router.get("", response_model=List[PaymentResponse], summary="List payments")
def list_payments(db: Session = Depends(get_session)):
     return list_records(db, Payment)


@payments_router.post(
     "",
     response_model=PaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a payment",
)
def create_payment(body: PaymentCreate, db: Session = Depends(get_session)):
     return create_record(db, Payment, body)


@maintenance_router.get("", response_model=List[MaintenanceResponse], summary="List maintenance requests")
def list_maintenance(db: Session = Depends(get_session)):
     return list_records(db, Maintenance)


@maintenance_router.post(
     "",
     response_model=MaintenanceResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Submit a maintenance request",
)
def create_maintenance(body: MaintenanceCreate, db: Session = Depends(get_session)):
     """
     Submit a maintenance request.

     - **status**: defaults to pending
     - **cost**: defaults to 0
     - **completion_date**: optional
     """
     return create_record(db, Maintenance, body)
