# pizza_shop/api/routers/users.py
from typing import Any, Dict

from fastapi import APIRouter, Depends

from pizza_shop.api.deps import request_data
from pizza_shop.api.validators import users as validators
from pizza_shop.data.storage import FileStore, get_store
from pizza_shop.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
def create_user(data: Dict[str, Any] = Depends(request_data), store: FileStore = Depends(get_store)):
    record = validators.post(data)
    return {"user": UserService(store).create_user(record)}


@router.get("")
def get_user(data: Dict[str, Any] = Depends(request_data), store: FileStore = Depends(get_store)):
    email, token_id = validators.get(data)
    return {"user": UserService(store).get_user(email, token_id)}


@router.put("")
def update_user(data: Dict[str, Any] = Depends(request_data), store: FileStore = Depends(get_store)):
    token_id, fields = validators.put(data)
    return {"user": UserService(store).update_user(token_id, fields)}


@router.delete("")
def delete_user(data: Dict[str, Any] = Depends(request_data), store: FileStore = Depends(get_store)):
    email, token_id = validators.delete(data)
    UserService(store).delete_user(email, token_id)
    return {"message": "user deleted successfully"}
