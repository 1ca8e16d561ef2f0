"""FastAPI application for the Tollgate authentication service."""
