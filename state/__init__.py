from .reducer import Action, AppState, Stats, reduce, compute_stats
from .store import DataStore, AuthenticationRequired

__all__ = [
    'Action',
    'AppState',
    'Stats',
    'reduce',
    'compute_stats',
    'DataStore',
    'AuthenticationRequired'
]
