"""Command line interface for batch cart parsing (entry point: ``cli.__main__.main``)."""
