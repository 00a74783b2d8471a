"""Application layer: DTOs and use cases for signup validation."""
