# access_tokens/shared/__init__.py
