import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.orm import Session

from .config import settings
from .database import engine, get_db
from .middleware.audit import audit_middleware
from .middleware.auth import auth_middleware
from .models.generated import Base
from .routers import (
    admin_universities,
    consultations,
    contact_messages,
    migrate_slugs,
    pages,
    settings as settings_router,
    success_stories,
    team_members,
    universities,
)

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Fresh SQLite databases; schema changes go through alembic
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.site_name} started")
    yield


app = FastAPI(title=f"{settings.site_name} API", lifespan=lifespan)

# ===== Middleware order (last added runs first) =====
app.middleware("http")(auth_middleware)
app.middleware("http")(audit_middleware)

app.include_router(pages.router)
app.include_router(universities.router)
app.include_router(consultations.public_router)
app.include_router(contact_messages.public_router)
app.include_router(team_members.public_router)
app.include_router(success_stories.public_router)

app.include_router(admin_universities.router)
app.include_router(migrate_slugs.router)
app.include_router(consultations.router)
app.include_router(contact_messages.router)
app.include_router(settings_router.router)
app.include_router(team_members.router)
app.include_router(success_stories.router)


@app.get("/health")
def health(db: Session = Depends(get_db)):
    return {"db": db.execute(text("SELECT 1")).scalar() == 1}
