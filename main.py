"""API principal - Punto de entrada del servicio de check-in"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
import logging
from contextlib import asynccontextmanager

from app.core.config import settings
from shared.dependencies import init_core
from shared.utils.rate_limiter import limiter, rate_limit_exceeded_handler
from services.checkin_validation.routes.checkin import router as checkin_router

# Configurar logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle events de la aplicación"""
    logger.info("Iniciando aplicación...")
    init_core(app)
    logger.info(f"{settings.SERVICE_NAME} iniciado")
    yield
    # Las colecciones viven en memoria y se descartan con el proceso
    logger.info("Aplicación cerrada")


app = FastAPI(
    title="Check-In Validation API",
    description="Validación de tickets NFT y registro de check-ins para eventos",
    version="1.0.0",
    lifespan=lifespan
)

# Configurar CORS PRIMERO (antes de rate limiting)
if settings.APP_ENV == "development":
    logger.info("Modo desarrollo: CORS configurado para permitir todos los orígenes")
    allow_origins = ["*"]
    allow_credentials = False  # No se puede usar credentials con allow_origins=["*"]
else:
    allow_origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()]
    allow_credentials = True
    logger.info(f"CORS origins configurados: {allow_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=allow_credentials,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)

# Configurar rate limiting DESPUÉS de CORS
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

app.include_router(checkin_router, prefix="/checkin", tags=["checkin"])


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {"status": "ok", "service": settings.SERVICE_NAME}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.APP_DEBUG
    )
