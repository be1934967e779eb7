"""Core - domain types and the error hierarchy. No FastAPI imports here."""
