"""Film catalogue management and viewing-log statistics."""

__version__ = "0.1.0"