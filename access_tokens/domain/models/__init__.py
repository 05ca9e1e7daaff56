# access_tokens/domain/models/__init__.py
