"""Greeting Schemas - response bodies served by the API."""

from pydantic import BaseModel


class WelcomeMessage(BaseModel):
    """Body of GET / in JSON mode."""
    message: str


class ErrorMessage(BaseModel):
    """Body of every error response."""
    error: str
