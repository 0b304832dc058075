from typing import Annotated, AsyncGenerator, Optional

from asyncpg import Connection
from fastapi import Depends, Path, Request, Security
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pydantic import ValidationError

from bizcards.core.config import settings
from bizcards.core.exceptions import TokenInvalidException
from bizcards.core.security import decode_access_token
from bizcards.db.session import get_pool
from bizcards.repositories.card_repo import CardRepository
from bizcards.repositories.memory import InMemoryCardRepository, InMemoryUserRepository
from bizcards.repositories.user_repo import UserRepository
from bizcards.schemas.auth_schema import TokenPayload
from bizcards.services.auth_services import AuthService
from bizcards.services.card_service import CardService
from bizcards.services.user_service import UserService

bearer_scheme = HTTPBearer(auto_error=False)
# header used by older clients
auth_token_header = APIKeyHeader(name="x-auth-token", auto_error=False)

# ids are int4 serials
RecordId = Annotated[int, Path(ge=1, le=2_147_483_647)]


async def get_connection() -> AsyncGenerator[Optional[Connection], None]:
    if settings.STORAGE_BACKEND == "memory":
        yield None
        return
    pool = await get_pool()
    async with pool.acquire() as connection:
        yield connection


def get_user_repo(request: Request, conn: Optional[Connection] = Depends(get_connection)):
    if conn is None:
        return InMemoryUserRepository(request.app.state.memory_store)
    return UserRepository(conn)


def get_card_repo(request: Request, conn: Optional[Connection] = Depends(get_connection)):
    if conn is None:
        return InMemoryCardRepository(request.app.state.memory_store)
    return CardRepository(conn)


def get_auth_service(user_repo=Depends(get_user_repo)) -> AuthService:
    return AuthService(user_repo)


def get_user_service(user_repo=Depends(get_user_repo)) -> UserService:
    return UserService(user_repo)


def get_card_service(card_repo=Depends(get_card_repo)) -> CardService:
    return CardService(card_repo)


def _extract_token(credentials: Optional[HTTPAuthorizationCredentials],
                   header_token: Optional[str]) -> Optional[str]:
    if credentials and credentials.scheme.lower() == "bearer" and credentials.credentials:
        return credentials.credentials
    if header_token:
        return header_token.strip()
    return None


async def _user_from_token(token: str, user_repo) -> dict:
    try:
        payload = decode_access_token(token)
        token_data = TokenPayload(**payload)
    except (JWTError, ValidationError):
        raise TokenInvalidException()

    if not token_data.sub or not token_data.sub.isdigit():
        raise TokenInvalidException()

    # role flags are read from the stored user, never trusted from the token alone
    user = await user_repo.get_by_id(int(token_data.sub))
    if user is None:
        raise TokenInvalidException("User of this token no longer exists.")
    return user


async def get_current_user(
        credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
        header_token: Optional[str] = Security(auth_token_header),
        user_repo=Depends(get_user_repo),
) -> dict:
    token = _extract_token(credentials, header_token)
    if not token:
        raise TokenInvalidException("Access denied. No token provided.")
    return await _user_from_token(token, user_repo)


async def get_optional_user(
        credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
        header_token: Optional[str] = Security(auth_token_header),
        user_repo=Depends(get_user_repo),
) -> Optional[dict]:
    token = _extract_token(credentials, header_token)
    if not token:
        return None
    try:
        return await _user_from_token(token, user_repo)
    except TokenInvalidException:
        return None
