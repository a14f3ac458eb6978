"""chartlock command line interface."""
