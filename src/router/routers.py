# src/router/routers.py

from fastapi import FastAPI
from src.modules.inquiry.inquiry_controller import router as inquiry_router

def include_routers(app: FastAPI) -> None:
    app.include_router(inquiry_router)
