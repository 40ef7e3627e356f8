"""Service entry point para check-in validation"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from shared.dependencies import init_core
from shared.utils.rate_limiter import limiter, rate_limit_exceeded_handler
from services.checkin_validation.routes.checkin import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_core(app)
    yield


app = FastAPI(title="Check-In Validation Service", lifespan=lifespan)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.include_router(router, prefix="/checkin", tags=["checkin"])
