# myshop/main.py
from fastapi import FastAPI
import uvicorn

from myshop.api.routers import health, products, results
from myshop.data.seed import seed
from myshop.repos.product_repo import ProductRepo
from myshop.utils.logging import get_logger
from myshop.utils.settings import APP_HOST, APP_PORT, SEED_PRODUCTS, SERVICE_NAME

logger = get_logger(__name__)


def create_app(repo: ProductRepo | None = None) -> FastAPI:
    app = FastAPI(
        title=SERVICE_NAME,
        version="1.0.0",
    )

    # kazda aplikacja ma wlasny katalog, testy dostaja swiezy stan
    if repo is None:
        repo = ProductRepo()
        if SEED_PRODUCTS:
            seed(repo)
    app.state.repo = repo
    logger.info(f"Katalog gotowy, produktow: {repo.count()}")

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(results.router)

    return app


def run() -> None:
    uvicorn.run("myshop.main:app", host=APP_HOST, port=APP_PORT)


app = create_app()

if __name__ == "__main__":
    run()
