"""Fixed-block slab allocator for cache entries, and the ``cortexd`` start-up command."""

__version__ = "0.1.0"
__all__ = ["slab", "daemon"]