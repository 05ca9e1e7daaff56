# access_tokens/domain/services/__init__.py
