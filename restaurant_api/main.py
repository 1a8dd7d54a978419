import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .database import engine, Base, SessionLocal, transaction
from .errors import register_error_handlers
# model modules register their tables on Base.metadata when imported
from .models import reservation as reservation_model, table as table_model  # noqa: F401
from .routes import reservations as reservations_router, tables as tables_router

logger = logging.getLogger("uvicorn.error")

DEFAULT_TABLES = [
    {"table_name": "Bar #1", "capacity": 1},
    {"table_name": "Bar #2", "capacity": 1},
    {"table_name": "#1", "capacity": 6},
    {"table_name": "#2", "capacity": 6},
]

app = FastAPI(
    title="Restaurant Reservations - REST API",
    description="REST API for restaurant reservations and table seating",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# modular routers
app.include_router(reservations_router.router)
app.include_router(tables_router.router)


@app.get("/")
def read_root():
    return {
        "message": "Restaurant Reservations - REST API",
        "version": "1.0.0",
        "service": "REST API (Python/FastAPI)",
        "status": "running"
    }


def seed_default_tables(db) -> int:
    """Insert the default dining room layout when no table exists yet."""
    if db.query(table_model.Table).first() is not None:
        return 0
    with transaction(db):
        for t in DEFAULT_TABLES:
            db.add(table_model.Table(**t))
    logger.info("Seeded %d default tables", len(DEFAULT_TABLES))
    return len(DEFAULT_TABLES)


@app.on_event('startup')
def startup():
    if settings.RUN_MIGRATIONS:
        from .utils.alembic_runner import run_migrations_if_needed
        run_migrations_if_needed()

    # Ensure tables exist (fallback if migrations not run)
    Base.metadata.create_all(bind=engine)
    if not settings.SEED_TABLES:
        return
    db = SessionLocal()
    try:
        seed_default_tables(db)
    finally:
        db.close()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=5001)
