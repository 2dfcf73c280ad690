"""Request-level concerns: bearer authentication and error rendering."""
