"""
Property, unit and owner-profile routes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from models import Owner, Property, Unit
from routers.records import create_record, list_records
from schemas.property import (
     OwnerCreate,
     OwnerResponse,
     PropertyCreate,
     PropertyResponse,
     UnitCreate,
     UnitResponse,
)

router = APIRouter(prefix="/properties", tags=["properties"])
units_router = APIRouter(prefix="/units", tags=["units"])
owners_router = APIRouter(prefix="/owners", tags=["owners"])


@router.get("", response_model=List[PropertyResponse], summary="List properties")
def list_properties(db: Session = Depends(get_session)):
     return list_records(db, Property)


@router.post(
     "",
     response_model=PropertyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a property",
)
def create_property(body: PropertyCreate, db: Session = Depends(get_session)):
     """
     Create a property owned by an existing user.

     - **owner_id**: user ID of the owner; rejected by the store if unknown
     - **value**: required
     """
     return create_record(db, Property, body)


@units_router.get("", response_model=List[UnitResponse], summary="List units")
def list_units(db: Session = Depends(get_session)):
     return list_records(db, Unit)


@units_router.post(
     "",
     response_model=UnitResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a unit",
)
def create_unit(body: UnitCreate, db: Session = Depends(get_session)):
     """Create a unit. Without **status** the unit is stored as vacant."""
     return create_record(db, Unit, body)


@owners_router.get("", response_model=List[OwnerResponse], summary="List owner profiles")
def list_owners(db: Session = Depends(get_session)):
     return list_records(db, Owner)


@owners_router.post(
     "",
     response_model=OwnerResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create an owner profile",
)
def create_owner(body: OwnerCreate, db: Session = Depends(get_session)):
     return create_record(db, Owner, body)
