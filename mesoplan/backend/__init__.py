"""Application configuration and FastAPI factory."""
