from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from pathlib import Path

from dodocoin.database import engine, Base
from dodocoin import models  # Import all models to register them with Base
from dodocoin.routes import router
from dodocoin.services.scheduler_service import start_scheduler, stop_scheduler

# Configure logging
from dodocoin.constants import DEFAULT_LOG_DIRECTORY_PROD, DEFAULT_LOG_DIRECTORY_DEV

LOG_DIR = os.getenv("DODOCOIN_LOG_DIR", DEFAULT_LOG_DIRECTORY_PROD)
LOG_FILE = os.getenv("DODOCOIN_LOG_FILE", "app.log")
AUTO_DAILY_BONUS = os.getenv("DODOCOIN_AUTO_DAILY_BONUS", "false").lower() in ("1", "true", "yes")

# Create log directory if it doesn't exist (for development)
try:
    Path(LOG_DIR).mkdir(parents=True, exist_ok=True)
    log_path = Path(LOG_DIR) / LOG_FILE
except PermissionError:
    # Fallback to local directory if no permissions for /var/log
    LOG_DIR = DEFAULT_LOG_DIRECTORY_DEV
    Path(LOG_DIR).mkdir(parents=True, exist_ok=True)
    log_path = Path(LOG_DIR) / LOG_FILE

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(log_path),
        logging.StreamHandler()  # Also log to console
    ]
)

logger = logging.getLogger("dodocoin")

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Dodo Coin API",
    description="Habit coins: earn by doing, spend on treats",
    version="1.0.0"
)

from dodocoin.constants import CORS_ALLOWED_ORIGINS

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

# Startup event
@app.on_event("startup")
async def startup_event():
    logger.info(f"Dodo Coin API started. Logging to: {log_path}")
    if AUTO_DAILY_BONUS:
        start_scheduler()

# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Dodo Coin API")
    stop_scheduler()

# Health check (no auth required)
@app.get("/")
async def root():
    return {"message": "Dodo Coin API", "status": "active"}
