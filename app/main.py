import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.registry import clear_rule_stores, load_rule_stores
from app.routes import chat_router, market_prices_router, schemes_router, weather_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: a ConfigurationError here stops the server before it serves
    load_rule_stores()
    logger.info("Rule stores loaded")
    yield
    # Shutdown
    clear_rule_stores()
    logger.info("Rule stores released")


app = FastAPI(
    title=settings.app_name,
    description="Bilingual farmer information service with a keyword rule engine",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    return {"message": f"{settings.app_name} API is running", "version": settings.app_version}


app.include_router(chat_router, prefix=settings.api_prefix)
app.include_router(schemes_router, prefix=settings.api_prefix)
app.include_router(market_prices_router, prefix=settings.api_prefix)
app.include_router(weather_router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "kisan-sahayak-backend"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
