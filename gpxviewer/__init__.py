"""GPX viewer: parse GPX documents into renderable map models."""

__version__ = "0.1.0"
