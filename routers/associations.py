from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from models import Association, BoardMember
from routers.records import create_record, list_records
from schemas.association import (
     AssociationCreate,
     AssociationResponse,
     BoardMemberCreate,
     BoardMemberResponse,
)

router = APIRouter(prefix="/associations", tags=["associations"])
board_members_router = APIRouter(prefix="/board-members", tags=["associations"])


@router.get("", response_model=List[AssociationResponse], summary="List HOA associations")
def list_associations(db: Session = Depends(get_session)):
     return list_records(db, Association)


@router.post(
     "",
     response_model=AssociationResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create an HOA association",
)
def create_association(body: AssociationCreate, db: Session = Depends(get_session)):
     return create_record(db, Association, body)


@board_members_router.get("", response_model=List[BoardMemberResponse], summary="List board members")
def list_board_members(db: Session = Depends(get_session)):
     return list_records(db, BoardMember)


@board_members_router.post(
     "",
     response_model=BoardMemberResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Add a board member",
)
def create_board_member(body: BoardMemberCreate, db: Session = Depends(get_session)):
     return create_record(db, BoardMember, body)
