# access_tokens/application/dtos/__init__.py
