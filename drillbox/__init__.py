"""Self-contained helpers: employees, increasing subsequences, shortest paths, collections and rate limiting."""

__version__ = "0.1.0"

__all__ = [
    "employees",
    "lis",
    "graphs",
    "generic_collections",
    "rate_limit",
]