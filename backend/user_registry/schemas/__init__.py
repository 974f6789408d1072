"""API Schemas — pydantic models for request validation and response shapes."""
