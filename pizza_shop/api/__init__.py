# pizza_shop/api/__init__.py
from fastapi import FastAPI

from pizza_shop.api.errors import register_error_handlers
from pizza_shop.api.routers import cart, health, menu, orders, tokens, users


def create_app(lifespan=None) -> FastAPI:
    app = FastAPI(title="Pizza Shop", version="1.0.0", lifespan=lifespan)

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(tokens.router)
    app.include_router(users.router)
    app.include_router(menu.router)
    app.include_router(cart.router)
    app.include_router(orders.router)

    return app
