"""Command-line front end for jobrun-logs."""
