"""System-wide error types and Pydantic models."""
