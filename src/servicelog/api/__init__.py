"""API layer: the servicelog command line."""
