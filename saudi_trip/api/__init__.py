"""API routes for the itinerary service."""
from .routes import router

__all__ = ["router"]
