from .cache import CachedResponse, ResponseCache
from .middleware import ResponseCacheMiddleware, cache_key

__all__ = ["CachedResponse", "ResponseCache", "ResponseCacheMiddleware", "cache_key"]
