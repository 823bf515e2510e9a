"""Web layer for swaggerhost."""
