"""
FastAPI dependencies shared by the routers.
"""
from fastapi import Depends, HTTPException, Request

from config import Settings
from services.security import JWTError, decode_access_token


def get_settings(request: Request) -> Settings:
     return request.app.state.settings


# Token Auth Dependency
def verify_token(request: Request, settings: Settings = Depends(get_settings)) -> dict:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise HTTPException(status_code=401, detail="Missing token")
     token = auth.split(" ", 1)[1]
     try:
          return decode_access_token(token, settings.jwt_secret, settings.jwt_algorithm)
     except JWTError:
          raise HTTPException(status_code=403, detail="Invalid token")
