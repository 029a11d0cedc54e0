"""REST API for the directory tree simulator."""
