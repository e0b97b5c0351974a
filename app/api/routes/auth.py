import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_store
from app.core.auth import get_current_user
from app.core.security import hash_password, verify_password, create_access_token, password_too_long
from app.core.store import DataStore, to_public
from app.models.user import User
from app.schemas.auth import RegisterRequest, LoginRequest, TokenResponse
from app.schemas.user import UserPublic

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _token_response(user: User) -> TokenResponse:
    token = create_access_token(str(user.id))
    return TokenResponse(access_token=token, user=to_public(user))


@router.post("/register", response_model=TokenResponse, status_code=201)
def register(payload: RegisterRequest, store: DataStore = Depends(get_store)):
    if store.find_user_by_email(payload.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    if password_too_long(payload.password):
        raise HTTPException(status_code=400, detail="Password too long (max 72 bytes)")

    user = store.add_user({
        "email": payload.email,
        "password": hash_password(payload.password),
        "name": payload.name.strip() if payload.name else None,
        "role": payload.role,
    })
    logger.info("User registered id=%s role=%s", user.id, user.role)

    return _token_response(user)


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, store: DataStore = Depends(get_store)):
    user = store.find_user_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return _token_response(user)


@router.get("/profile", response_model=UserPublic)
def profile(user: User = Depends(get_current_user)):
    return to_public(user)
