"""FastAPI trigger for the news pipeline.

``GET /`` or ``POST /`` runs one pipeline cycle. ``OPTIONS /`` answers
with permissive CORS headers and never runs the pipeline.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .orchestrator import NewsPipeline
from .utils.logging import configure_logging

load_dotenv(override=False)
configure_logging()

app = FastAPI(title="News Pipeline")

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS,
)


def build_pipeline() -> NewsPipeline:
    """Construct a pipeline from the current environment."""
    return NewsPipeline()


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.options("/")
def preflight() -> PlainTextResponse:
    # Full CORS preflights are answered by the middleware; this covers bare OPTIONS
    headers = {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
    }
    return PlainTextResponse("ok", headers=headers)


@app.api_route("/", methods=["GET", "POST"])
def run_pipeline() -> JSONResponse:
    status, body = build_pipeline().run_safely()
    return JSONResponse(status_code=status, content=body)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "news_pipeline.server:app",
        host=os.getenv("PIPELINE_HOST", "0.0.0.0"),
        port=int(os.getenv("PIPELINE_PORT", "8000")),
    )
