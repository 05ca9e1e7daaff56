# access_tokens/adapters/outbound/__init__.py
