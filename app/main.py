from fastapi import FastAPI
from app.routers import health, ingredients, recipes
from app.core.logging import setup_logging
from app.core.middleware import RequestLoggingMiddleware


def create_app() -> FastAPI:
    app = FastAPI(title="Recipe Bridge")
    app.include_router(ingredients.router)
    app.include_router(recipes.router)
    app.include_router(health.router)

    setup_logging()

    app.add_middleware(RequestLoggingMiddleware)

    return app

app = create_app()
