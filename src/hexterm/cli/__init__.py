"""hexterm command line interface."""
