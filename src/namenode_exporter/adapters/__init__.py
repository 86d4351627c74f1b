"""Adapters connecting the core to HTTP, logging and the operating system."""
