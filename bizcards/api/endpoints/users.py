import logging
import traceback
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from bizcards.api.deps import RecordId, get_auth_service, get_current_user, get_user_service
from bizcards.core.exceptions import InternalServerException, InvalidCredentialsException
from bizcards.schemas.auth_schema import Token, UserLogin
from bizcards.schemas.common_schema import APIMessage
from bizcards.schemas.user_schema import UserOut, UserRegister, UserUpdate
from bizcards.services.auth_services import AuthService
from bizcards.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
async def register(user_in: UserRegister, auth_svc: AuthService = Depends(get_auth_service)):
    try:
        user = await auth_svc.register_user(user_in)
        return Token(access_token=auth_svc.create_token_for_user(user))
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in register: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.post("/login", response_model=Token)
async def login(credentials: UserLogin, auth_svc: AuthService = Depends(get_auth_service)):
    try:
        user = await auth_svc.authenticate(credentials.email, credentials.password)
    except Exception as e:
        logging.error(f"Internal Server Error in login: {e}\n{traceback.format_exc()}")
        raise InternalServerException()
    if not user:
        raise InvalidCredentialsException()
    return Token(access_token=auth_svc.create_token_for_user(user))


@router.get("", response_model=UserOut)
async def read_current_user(current_user: dict = Depends(get_current_user)):
    return current_user


@router.put("/update/{user_id}", response_model=UserOut)
async def update_user(
        user_id: RecordId,
        user_in: UserUpdate,
        current_user: dict = Depends(get_current_user),
        user_svc: UserService = Depends(get_user_service),
):
    try:
        return await user_svc.update_user(current_user, user_id, user_in)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in update_user: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.get("/all", response_model=List[UserOut])
async def list_users(
        current_user: dict = Depends(get_current_user),
        user_svc: UserService = Depends(get_user_service),
):
    try:
        return await user_svc.list_users(current_user)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in list_users: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.get("/profile/{user_id}", response_model=UserOut)
async def read_user_profile(
        user_id: RecordId,
        current_user: dict = Depends(get_current_user),
        user_svc: UserService = Depends(get_user_service),
):
    try:
        return await user_svc.get_user(user_id)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in read_user_profile: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.delete("/{user_id}", response_model=APIMessage)
async def delete_user(
        user_id: RecordId,
        current_user: dict = Depends(get_current_user),
        user_svc: UserService = Depends(get_user_service),
):
    try:
        await user_svc.delete_user(current_user, user_id)
        return APIMessage(message="User deleted successfully")
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in delete_user: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.patch("/business/{user_id}", response_model=UserOut)
async def toggle_business_status(
        user_id: RecordId,
        current_user: dict = Depends(get_current_user),
        user_svc: UserService = Depends(get_user_service),
):
    try:
        return await user_svc.toggle_business(current_user, user_id)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in toggle_business_status: {e}\n{traceback.format_exc()}")
        raise InternalServerException()
