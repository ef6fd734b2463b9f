"""Infrastructure layer - logging, singleton support and the example registry."""
