# access_tokens/application/__init__.py
