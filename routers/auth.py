"""
User accounts and login.

POST /login exchanges email + password for a signed token. The token is
only required by GET /me; record, report and diagnostic routes are open.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from config import Settings
from database import get_session
from dependencies import get_settings, verify_token
from models import User
from routers.records import create_record, list_records
from schemas.user import LoginRequest, TokenResponse, UserCreate, UserResponse
from services.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])
users_router = APIRouter(prefix="/users", tags=["users"])


@router.post("/login", response_model=TokenResponse, summary="Log in")
def login_user(
     body: LoginRequest,
     db: Session = Depends(get_session),
     settings: Settings = Depends(get_settings),
):
     user = db.query(User).filter(User.email == body.email).first()

     # Same answer for an unknown email and a wrong password
     if not user or not verify_password(body.password, user.password):
          logger.info("Rejected login for %s", body.email)
          raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

     token = create_access_token(
          {"id": user.id, "role": user.role.value},
          settings.jwt_secret,
          algorithm=settings.jwt_algorithm,
          expires_minutes=settings.jwt_expires_minutes,
     )
     return {"token": token}


@router.get("/me", response_model=UserResponse, summary="Current user")
def get_current_user(
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session),
):
     user = db.get(User, token.get("id"))
     if not user:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
     return user


@users_router.get("", response_model=List[UserResponse], summary="List users")
def list_users(db: Session = Depends(get_session)):
     return list_records(db, User)


@users_router.post(
     "",
     response_model=UserResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a user",
)
def create_user(body: UserCreate, db: Session = Depends(get_session)):
     """
     Create a login account. A duplicate **email** is rejected by the store.
     """
     return create_record(db, User, body, password=hash_password(body.password))
