# access_tokens/application/ports/__init__.py
