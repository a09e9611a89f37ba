"""FastAPI application exposing the booking engine over HTTP."""
