# api/gateway.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.seed import router as seed_router
from settings import CORS_ORIGINS, LOG_LEVEL

# Setup
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("api.gateway")

app = FastAPI(title="Dashboard API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(seed_router)


@app.get("/health")
def health():
    return {"status": "ok"}
