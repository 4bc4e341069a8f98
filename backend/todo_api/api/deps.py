import uuid
from typing import Mapping

from fastapi import Depends, Request, Response

from todo_api.core.config import Settings
from todo_api.core.errors import AuthenticationError
from todo_api.core.security import TokenService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


def resolve_session(
    cookies: Mapping[str, str], tokens: TokenService, cookie_name: str
) -> uuid.UUID:
    """Turn the session cookie into the caller's user id.

    The subject is trusted as-is; the user row is not re-read.
    """
    token = cookies.get(cookie_name)
    if not token:
        raise AuthenticationError("User not logged in")

    subject = tokens.verify(token)
    if subject is None:
        raise AuthenticationError("Session Expired.")

    try:
        return uuid.UUID(subject)
    except ValueError:
        raise AuthenticationError("Session Expired.")


def get_current_user_id(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
) -> uuid.UUID:
    return resolve_session(request.cookies, tokens, settings.cookie_name)


def set_session_cookie(response: Response, token: str, max_age: int, settings: Settings) -> None:
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=max_age,
        httponly=True,
        samesite="none",
        secure=settings.cookie_secure,
        path="/",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.set_cookie(
        key=settings.cookie_name,
        value="",
        max_age=0,
        httponly=True,
        samesite="none",
        secure=settings.cookie_secure,
        path="/",
    )
