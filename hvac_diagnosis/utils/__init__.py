"""Input validation, logging setup and report rendering."""
