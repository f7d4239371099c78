"""Observability – integration with the application's logging pipeline."""
