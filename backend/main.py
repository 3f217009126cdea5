"""Academic Repository: Main application entry point."""

import logging

from alembic import command
from alembic.config import Config
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import BASE_DIR
from exceptions import DomainError
from logging_config import setup_logging

from api.institutions.controllers.institutions_controller import router as institutions_router
from api.users.controllers.users_controller import router as users_router
from api.disciplines.controllers.disciplines_controller import router as disciplines_router
from api.files.controllers.files_controller import router as files_router
from api.comments.controllers.comments_controller import router as comments_router

logger = logging.getLogger(__name__)


def run_migrations():
    """Run Alembic migrations on startup."""
    try:
        alembic_cfg = Config(str(BASE_DIR / "alembic.ini"))
        alembic_cfg.set_main_option("script_location", str(BASE_DIR / "db_migrations"))
        command.upgrade(alembic_cfg, "head")
    except Exception as e:
        logger.warning("Migration failed, creating tables from metadata: %s", e)
        from database import init_db

        init_db()


setup_logging()

app = FastAPI(title="Academic Repository", version="0.1.0")

# Run database migrations
run_migrations()

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/api/health")
async def health():
    return {"status": "ok"}


app.include_router(institutions_router)
app.include_router(users_router)
app.include_router(disciplines_router)
app.include_router(files_router)
app.include_router(comments_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000)
