from contextlib import asynccontextmanager

from fastapi import FastAPI

from wanderlust.config import settings
from wanderlust.database import connect_db, disconnect_db
from wanderlust.logging_config import setup_logging
from wanderlust.seeding.router import router as seed_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await connect_db()
    yield
    await disconnect_db()


app = FastAPI(
    title="Wanderlust Seeder",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
    openapi_url="/openapi.json" if settings.DOCS_ENABLED else None,
)

app.include_router(seed_router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
