"""Persistence implementations for the tollgate application."""
