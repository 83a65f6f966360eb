"""
POST_BUILDER — FastAPI app
Démarrer : uvicorn post_builder.api:app --reload --port 8002
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .database import init_db
from .router import router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="POST_BUILDER — Éditeur de posts", version="1.0.0", docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


@app.on_event("startup")
def startup():
    init_db()
    log.info("DB initialisée (SQLite)")


app.include_router(router)


@app.get("/health")
def health():
    return {"status": "ok"}
