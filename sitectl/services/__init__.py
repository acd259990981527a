"""Service layer for sitectl: logging, tools and task execution."""
