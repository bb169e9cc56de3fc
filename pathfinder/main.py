import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathfinder.config import LOG_LEVEL, LLM_PROVIDER, WEB_ORIGINS
from pathfinder.routes import router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# =========================
# App
# =========================
app = FastAPI(title="PathFinder AI API", version="0.1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=WEB_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

logger.info("PathFinder API ready (provider=%s)", LLM_PROVIDER)
