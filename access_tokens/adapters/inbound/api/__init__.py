# access_tokens/adapters/inbound/api/__init__.py
