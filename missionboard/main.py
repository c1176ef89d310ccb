# missionboard/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from missionboard.api.v1.api import api_router
from missionboard.core.config import settings
from missionboard.core.limiter import limiter
from missionboard.db.base_class import Base
from missionboard.db.session import engine
from missionboard.middleware.error_handler import register_exception_handlers
import missionboard.models  # noqa: F401  registers every table on Base.metadata

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("MissionBoard starting up...")
    if settings.AUTO_CREATE_TABLES:
        # Local convenience only; deployed databases are migrated with Alembic
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables checked and created if necessary.")
    yield
    logger.info("MissionBoard shutting down...")


app = FastAPI(
    title="MissionBoard API",
    version="1.0.0",
    description="""
        **MissionBoard** membership management.

        ## Features

        * **Members**: Organization-scoped member records
        * **Events**: Scheduling, capacity and waitlists
        * **Plans & Subscriptions**: Monthly and yearly billing periods
        * **Payments**: Manually recorded payments and revenue
        * **Public pages**: Event discovery and registration without an account

        ## Authentication

        Most endpoints require JWT authentication via the `Authorization: Bearer <token>` header.
        Endpoints under `/public/` are accessible without authentication.
        """,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    return {"status": "MissionBoard API is running"}
