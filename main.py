# Run: uvicorn main:app --reload

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

import config
from placement.routes import router as placement_router

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logging.info("Placement criteria service starting")

app = FastAPI(title="Placement Criteria Service", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(placement_router)


@app.get("/", tags=["health"])
def root():
    return {"status": "ok", "service": "placement-criteria"}
