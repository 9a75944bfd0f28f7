# src/main.py

import logging

from fastapi import FastAPI
from src.common.config import settings
from src.router.routers import include_routers

# Centralized logging configuration
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# CORS headers for the contact route are set by the inquiry handler itself,
# so no CORSMiddleware is installed to intercept its preflight requests.
app = FastAPI(
    title="Inquiry API",
    description="Website contact form handler that emails staff and confirms receipt to the submitter.",
    version="1.0.0",
)

# Include routers from a separate file
include_routers(app)

# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "ok", "message": "API is running"}
