import logging
from typing import Optional
from contextlib import asynccontextmanager
from fastapi import FastAPI, status

from beer_api.api.graphql import create_graphql_router
from beer_api.api.v1.beers import router as beers_router
from beer_api.core.config import API_PREFIX, GRAPHQL_PATH, LOG_LEVEL, PROJECT_NAME, SEED_SAMPLE_DATA, VERSION
from beer_api.core.exception_handlers import setup_exception_handlers
from beer_api.core.store import BeerStore
from beer_api.scripts.seed_data import seed
from beer_api.services.beer_service import BeerService

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handles startup and shutdown events."""
    log.info(f"Starting {PROJECT_NAME} v{VERSION} with {len(app.state.beer_service.store)} beers...")
    yield
    log.info(f"{PROJECT_NAME} stopped.")


def create_app(store: Optional[BeerStore] = None, seed_data: bool = SEED_SAMPLE_DATA) -> FastAPI:
    """Builds the app around one BeerStore, seeded with the demo beers unless disabled."""
    if store is None:
        store = BeerStore()
        if seed_data:
            seed(store)

    app = FastAPI(
        title=PROJECT_NAME,
        version=VERSION,
        lifespan=lifespan,
        # Configure API documentation and paths
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.beer_service = BeerService(store)

    # REST and GraphQL share the same service instance
    app.include_router(beers_router, prefix=API_PREFIX, tags=["Beer"])
    app.include_router(create_graphql_router(), prefix=GRAPHQL_PATH, tags=["GraphQL"])

    setup_exception_handlers(app)

    @app.get("/health", status_code=status.HTTP_200_OK)
    async def health_check():
        """Simple health check endpoint."""
        return {"status": "ok", "app_name": PROJECT_NAME}

    return app


app = create_app()
