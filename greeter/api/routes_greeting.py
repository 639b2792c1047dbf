"""Greeting endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "Hello from the backend!"

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse)
async def greet():
    """Fixed greeting."""
    return GREETING
