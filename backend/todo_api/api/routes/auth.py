import logging

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from todo_api import crud
from todo_api.api.deps import (
    clear_session_cookie,
    get_settings,
    get_token_service,
    set_session_cookie,
)
from todo_api.core.config import Settings
from todo_api.core.database import get_session
from todo_api.core.errors import ValidationError
from todo_api.core.security import TokenService, hash_password, verify_password
from todo_api.schemas.auth import SignupIn, LoginIn, SuccessOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=SuccessOut)
def signup(payload: SignupIn, session: Session = Depends(get_session)):
    existing = crud.get_user_by_username(session, payload.username)
    if existing:
        raise ValidationError("Username already taken")

    user = crud.create_user(
        session,
        username=payload.username,
        password_hash=hash_password(payload.password),
    )
    logger.info("Signed up user %s", user.id)

    return SuccessOut()


@router.post("/login", response_model=SuccessOut)
def login(
    payload: LoginIn,
    response: Response,
    session: Session = Depends(get_session),
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
):
    user = crud.get_user_by_username(session, payload.username)

    if not user or not verify_password(payload.password, user.password_hash):
        logger.info("Failed login for username %r", payload.username)
        raise ValidationError("Invalid Login Details")

    token = tokens.issue(str(user.id))
    set_session_cookie(response, token, tokens.max_age, settings)
    logger.info("User %s logged in", user.id)

    return SuccessOut()


@router.post("/logout", response_model=SuccessOut)
def logout(response: Response, settings: Settings = Depends(get_settings)):
    # no server-side revocation: the token stays valid until it expires
    clear_session_cookie(response, settings)
    return SuccessOut()
