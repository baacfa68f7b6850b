import os

SUPPORTED_BACKENDS = ("numba", "jax")

# Backend used when a caller does not pass one explicitly
DEFAULT_BACKEND = os.environ.get("UNITROOT_BACKEND", "numba").lower()

LOG_LEVEL = os.environ.get("UNITROOT_LOG_LEVEL", "WARNING").upper()
