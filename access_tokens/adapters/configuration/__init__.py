# access_tokens/adapters/configuration/__init__.py
