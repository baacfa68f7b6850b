import importlib
import logging
from typing import Dict, Callable

from unitroot.config import SUPPORTED_BACKENDS

logger = logging.getLogger(__name__)

# Kernels per backend name, filled in when a backend package is imported
_BACKENDS: Dict[str, Dict[str, Callable]] = {}

def register_backend(name: str, functions: Dict[str, Callable]) -> None:
    """
    Make a set of linear algebra kernels available under a backend name.

    Parameters
    ----------
    name : str
        Backend name, e.g. "numba" or "jax".
    functions : Dict[str, Callable]
        Kernel name -> implementation. The OLS driver expects
        "ols_fit_core", "stats_core" and "rank_deficient_core".
    """
    _BACKENDS[name] = functions

def _load_backend(name: str) -> Dict[str, Callable]:
    """
    Import a backend package on first use. Importing it registers its kernels.
    """
    if name not in _BACKENDS:
        if name not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Invalid backend: {name}. Must be one of {', '.join(SUPPORTED_BACKENDS)}."
            )
        logger.debug("Loading %s backend", name)
        importlib.import_module(f"unitroot.backends.{name}")

    return _BACKENDS[name]

def get_backend_function(backend_name: str, function_name: str) -> Callable:
    """
    Look up one kernel of a backend, loading the backend if needed.

    Raises
    ------
    ValueError
        If the backend is unknown or does not provide the kernel.
    """
    functions = _load_backend(backend_name)

    if function_name not in functions:
        raise ValueError(f"Function '{function_name}' not found in backend '{backend_name}'")

    return functions[function_name]

class StatisticalBackend:
    """
    Attribute access to the kernels of one backend.

    ``StatisticalBackend("jax").ols_fit_core`` is the jax least-squares
    kernel. Unknown kernels raise AttributeError.
    """

    def __init__(self, backend: str = "numba"):
        """
        Raises
        ------
        ValueError
            If the backend is not one of SUPPORTED_BACKENDS and was never
            registered.
        """
        self.backend = backend
        self._functions = _load_backend(backend)

    def __getattr__(self, function_name: str) -> Callable:
        # Only called for names missing from the instance dict
        functions = self.__dict__.get("_functions", {})
        if function_name in functions:
            return functions[function_name]
        backend = self.__dict__.get("backend")
        raise AttributeError(f"Function '{function_name}' not found in backend '{backend}'")
