# pizza_shop/api/routers/tokens.py
from typing import Any, Dict

from fastapi import APIRouter, Depends

from pizza_shop.api.deps import get_token_service, request_data
from pizza_shop.api.validators import tokens as validators
from pizza_shop.data.storage import FileStore, get_store
from pizza_shop.domain.errors import NotFoundError
from pizza_shop.services.token_service import TokenService
from pizza_shop.services.user_service import UserService
from pizza_shop.utils.settings import TOKEN_TTL_MS

router = APIRouter(prefix="/tokens", tags=["tokens"])


@router.post("")
def create_token(data: Dict[str, Any] = Depends(request_data), store: FileStore = Depends(get_store)):
    """Log in: trade email + password for a bearer token."""
    credentials = validators.post(data)
    token = UserService(store).login(credentials["email"], credentials["password"])
    return {"token": token.to_record()}


@router.get("")
def get_token(data: Dict[str, Any] = Depends(request_data),
              svc: TokenService = Depends(get_token_service)):
    token_id = validators.get(data)
    try:
        token = svc.load(token_id)
    except NotFoundError:
        raise NotFoundError("token not found", status_code=400)
    return {"token": token.to_record()}


@router.put("")
def extend_token(data: Dict[str, Any] = Depends(request_data),
                 svc: TokenService = Depends(get_token_service)):
    token_id = validators.put(data)
    svc.extend(token_id, TOKEN_TTL_MS)
    return {"message": "token extended"}


@router.delete("")
def delete_token(data: Dict[str, Any] = Depends(request_data),
                 svc: TokenService = Depends(get_token_service)):
    token_id = validators.delete(data)
    try:
        svc.delete(token_id)
    except NotFoundError:
        # logging out twice is not an error
        pass
    return {"message": "token deleted"}
