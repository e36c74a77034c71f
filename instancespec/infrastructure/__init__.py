"""Infrastructure layer - adapters behind the domain ports."""
