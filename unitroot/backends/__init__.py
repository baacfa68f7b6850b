# unitroot/backends/__init__.py
# Backends register themselves on import; see unitroot.backend._load_backend.
