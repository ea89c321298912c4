# pizza_shop/api/routers/menu.py
from fastapi import APIRouter, Depends

from pizza_shop.data.storage import FileStore, get_store
from pizza_shop.repos.menu_repo import MenuRepo

router = APIRouter(prefix="/menu", tags=["menu"])


@router.get("")
def get_menu(store: FileStore = Depends(get_store)):
    return {"menu": MenuRepo(store).grouped()}
