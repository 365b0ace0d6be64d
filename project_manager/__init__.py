"""Project manager: CRUD backend for portfolio projects, packages and clients."""

__version__ = "0.1.0"
