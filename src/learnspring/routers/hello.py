"""Greeting endpoint."""
import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/hello", response_class=PlainTextResponse)
async def hello() -> str:
    logger.debug("Serving /hello")
    return "hello"
