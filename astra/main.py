"""
Main application entry point - FastAPI app instance and configuration.
Run with: uvicorn astra.main:app --reload  (or: python -m astra)
"""

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from astra import __version__
from astra.core.config import settings
from astra.routers import assistant

# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# CORS MIDDLEWARE
# ---------------------------------------------------------------------------
# The chat front-end is served from its own dev server (another origin)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
app.include_router(assistant.router)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.
    
    Returns:
        {"status": "ok", "llm_enabled": bool}
    """
    return {"status": "ok", "llm_enabled": settings.has_llm_credentials}


def run() -> None:
    """Console entry point: serve the app on HOST:PORT."""
    uvicorn.run(
        "astra.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
