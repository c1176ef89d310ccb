from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from missionboard.core.config import settings

# SQLite is only used for local development and tests; it needs to allow
# the connection to be used from FastAPI's threadpool.
connect_args = (
    {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
)

# The engine is the entry point to the database. It's configured with the
# database URL and handles the connection pooling.
engine = create_engine(
    settings.DATABASE_URL, pool_pre_ping=True, connect_args=connect_args
)

# SessionLocal is a factory for creating new Session objects, one per request.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        # 'yield' passes the session object to the endpoint.
        yield db
    finally:
        # Runs after the endpoint has finished, even if it raised.
        db.close()
