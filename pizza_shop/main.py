# pizza_shop/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from pizza_shop.api import create_app
from pizza_shop.data.seed import seed_menu
from pizza_shop.data.storage import FileStore
from pizza_shop.utils.settings import HOST, PORT
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Seeding menu...")
    seed_menu(FileStore())
    yield


app = create_app(lifespan=lifespan)


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
