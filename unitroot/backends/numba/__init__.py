from ...backend import register_backend

from .ols import _ols_fit_core, _stats_core, _rank_deficient_core

# Register numba backend
register_backend("numba", {
    "ols_fit_core": _ols_fit_core,
    "stats_core": _stats_core,
    "rank_deficient_core": _rank_deficient_core,
})
