"""Greeter backend API."""

import logging

from fastapi import FastAPI

from greeter.api.routes_greeting import router as greeting_router

# Diagnostics go to stderr; stdout carries only the startup announcement.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Only "/" is served; docs and schema routes stay off.
app = FastAPI(
    title="Greeter",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.include_router(greeting_router)
