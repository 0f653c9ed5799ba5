"""
FastAPI backend for the Question Simplifier.

Exposes:
- Relay endpoints (via `relay.router`) used by the web UI
- A health check
"""

from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .relay import router as relay_router


def create_app() -> FastAPI:
    app = FastAPI(title="Question Simplifier", version="0.1.0")

    # Allow local UIs (Streamlit) to talk to the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    app.include_router(relay_router)

    return app


app = create_app()
