from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from app.auth.router import router as auth_router
from app.core.cors import add_cors_middleware
from app.core.exception_handlers import register_exception_handlers
from app.core.http import close_http_clients
from app.core.logging import configure_logging
from app.core.request_logging import add_request_logging_middleware
from app.db.engine import init_db
from app.donation.router import router as donation_router
from app.funding.router import router as funding_router
from app.health.router import router as health_router
from app.media.router import router as media_router
from app.stats.router import router as stats_router
from app.user.router import router as user_router

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_db()
    yield
    await close_http_clients()


app = FastAPI(title="Blood Donation API", version="0.1.0", lifespan=lifespan)

api_router = APIRouter()
for domain_router in (
    health_router,
    auth_router,
    user_router,
    donation_router,
    funding_router,
    media_router,
    stats_router,
):
    api_router.include_router(domain_router)

app.include_router(api_router)

add_request_logging_middleware(app)
add_cors_middleware(app)
register_exception_handlers(app)
