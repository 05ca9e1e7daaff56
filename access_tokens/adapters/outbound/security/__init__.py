# access_tokens/adapters/outbound/security/__init__.py
