"""API route modules."""

from speedlearn.api.routes import assessment, health, rsvp

__all__ = ["assessment", "health", "rsvp"]
