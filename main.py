# main.py
"""
Application entrypoint. Includes routers and mounts.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from teamforge.api.routers import teams
from teamforge.config.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="Teamforge Team Formation")

# Basic CORS (adjust origins in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# include routers
app.include_router(teams.router, prefix="/api/v1/teams", tags=["teams"])


@app.get("/")
async def index():
    """Health / basic info endpoint."""
    return {"status": "ok", "service": "teamforge", "env": settings.ENV}
