"""Solutions to classic programming exercises: list operations, change making, subsequences, shortest paths, containers, caches and a circuit breaker."""

__version__ = "0.1.0"

__all__ = [
    "cache",
    "circuit",
    "coins",
    "containers",
    "graphs",
    "lis",
    "sliceops",
]