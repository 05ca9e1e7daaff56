# access_tokens/adapters/inbound/api/endpoints/__init__.py
