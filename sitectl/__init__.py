"""sitectl: a static-site workflow runner."""
