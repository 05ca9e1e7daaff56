# access_tokens/__init__.py

"""Access token service: issues and lists opaque bearer tokens."""

__version__ = "1.0.0"
