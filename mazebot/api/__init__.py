"""HTTP API: FastAPI app, turn scheduler and routes."""
