import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlmodel import Session

from .api.exceptions import register_exception_handlers
from .api.routes import router as accounts_router, transfer_router
from .core.bootstrap import seed_accounts
from .core.config import get_settings
from .core.db import get_engine, init_db

settings = get_settings()
logging.basicConfig(level=settings.log_level)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if settings.seed_demo_accounts:
        with Session(get_engine()) as session:
            seed_accounts(session)
    yield

app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.include_router(accounts_router)
app.include_router(transfer_router)
register_exception_handlers(app)

@app.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "ok"}
