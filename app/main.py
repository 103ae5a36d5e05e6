from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.routes_health import router as health_router
from app.api.routes_summary import router as summary_router
from app.api.routes_trend import router as trend_router
from app.core.config import settings
from app.core.logger import setup_logging


setup_logging(settings.LOG_LEVEL)
app = FastAPI(title="Chemo Journal AI Summary API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["POST", "OPTIONS", "GET"],
    allow_headers=["Content-Type", "Authorization"],
)


app.include_router(health_router, prefix="/health", tags=["health"])
app.include_router(summary_router, prefix="/api", tags=["summary"])
app.include_router(trend_router, prefix="/api", tags=["trend"])
