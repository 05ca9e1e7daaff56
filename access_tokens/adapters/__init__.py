# access_tokens/adapters/__init__.py
