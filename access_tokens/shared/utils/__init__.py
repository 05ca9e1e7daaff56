# access_tokens/shared/utils/__init__.py
