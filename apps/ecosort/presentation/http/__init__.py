"""HTTP Presentation (FastAPI)."""
