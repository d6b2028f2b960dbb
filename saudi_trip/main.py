"""
FastAPI Application Entry Point.
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router
from .config import settings
from .services.llm_client import build_llm_client


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the LLM client once and hand it to requests through app.state."""
    app.state.llm_client = build_llm_client(settings)
    if app.state.llm_client is None:
        logger.warning("Itinerary generation disabled until an LLM API key is configured")
    yield
    if app.state.llm_client is not None:
        await app.state.llm_client.close()


# Create FastAPI app
app = FastAPI(
    title="Saudi Trip Planner",
    description="Streams personalized Saudi Arabia itineraries generated by an LLM",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    llm_client = getattr(app.state, "llm_client", None)
    return {
        "status": "healthy",
        "llm_provider": settings.llm_provider,
        "llm_configured": llm_client is not None
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "saudi_trip.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
