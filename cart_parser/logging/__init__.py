"""Logging setup and structured error log for the cart parser."""
