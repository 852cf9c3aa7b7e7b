"""FastAPI application serving customer and order search to the grid UI."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers.search import router as search_router


logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(title="Customer/Order Search")

# The grid UI is served from the commerce host, not from this API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(search_router)


@app.get("/health", tags=["ops"], summary="Health check")
async def health():
    return {"status": "ok"}
