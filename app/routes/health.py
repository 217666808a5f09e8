"""
Health check endpoint for the application.

Description:
This module defines a FastAPI route for checking that the process is serving
requests. It touches neither the database nor the AI provider.

Returns:
- 200 with the plain-text body "OK".

Dependencies:
- fastapi: For creating the route and the plain-text response.
- loguru: For logging information about the health check endpoint.
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from loguru import logger

router = APIRouter(
    tags=["health"],
)

@router.get("/health", response_class=PlainTextResponse)
async def health():
    logger.debug("Health check endpoint called")
    return PlainTextResponse("OK", status_code=200)
