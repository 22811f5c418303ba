"""Infrastructure layer: HTTP integration and observability."""
