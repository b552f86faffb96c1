# studium/adapters/inbound/api/endpoints/__init__.py
