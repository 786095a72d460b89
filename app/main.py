import logging

from fastapi import FastAPI

from app.api.dinosaurs import router as dinosaurs_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)

app = FastAPI(
    title="Dinosaur app",
    version="0.1.0",
)

app.include_router(dinosaurs_router)
