"""Domain layer - exceptions shared by every pattern example."""
