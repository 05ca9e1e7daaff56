# access_tokens/adapters/outbound/persistence/__init__.py
