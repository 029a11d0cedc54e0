"""Route modules for the REST API."""
