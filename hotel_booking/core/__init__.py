"""Core utilities: exceptions, logging, middleware and security."""
