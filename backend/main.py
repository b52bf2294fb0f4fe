# backend/main.py
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

load_dotenv()

from config import settings
from database import SessionLocal, init_db
from utils import analytics
from utils.session_auth import purge_expired_sessions

# Routers
from routes.auth import router as auth_router
from routes.users import router as users_router
from routes.services import router as services_router
from routes.solutions import router as solutions_router
from routes.resources import router as resources_router
from routes.company_info import router as company_info_router
from routes.messages import router as messages_router
from routes.analytics import router as analytics_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create missing tables and drop stale sessions
init_db()
with SessionLocal() as _db:
    purge_expired_sessions(_db)

app = FastAPI(title="AI Consulting Site API", version="1.0.0")

# CORS Configuration
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _track_visit():
    with SessionLocal() as db:
        analytics.track(db, analytics.PAGE_VIEWS, analytics.VISITORS)


# Count every non-API request as a page view and a visitor
@app.middleware("http")
async def track_page_views(request: Request, call_next):
    if not request.url.path.startswith("/api"):
        await run_in_threadpool(_track_visit)
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation error", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Register routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(services_router)
app.include_router(solutions_router)
app.include_router(resources_router)
app.include_router(company_info_router)
app.include_router(messages_router)
app.include_router(analytics_router)


@app.get("/api/health")
def health():
    return {"status": "ok"}


# Pre-built client bundle, when deployed next to the API
static_dir = Path(settings.STATIC_DIR)
if static_dir.is_dir():
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="client")
else:
    @app.get("/")
    def read_root():
        return {"message": "AI Consulting Site API is running"}

logger.info("Application started (environment=%s)", settings.ENVIRONMENT)
