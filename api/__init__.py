"""HTTP layer - FastAPI service for the helper commands."""
