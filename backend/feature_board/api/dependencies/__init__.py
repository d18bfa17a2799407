"""FastAPI dependencies and middleware."""
