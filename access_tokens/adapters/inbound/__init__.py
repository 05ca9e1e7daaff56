# access_tokens/adapters/inbound/__init__.py
