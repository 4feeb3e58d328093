"""
Lookup cache.

Key -> value store over Redis with explicit invalidation. Used by the
orchestration service only; the calculation engine never caches.
"""

from typing import TypeVar

import redis
from loguru import logger
from pydantic import BaseModel

from fd_calculator.config import Settings


ModelT = TypeVar("ModelT", bound=BaseModel)

PRODUCTS = "products"
CLASSIFICATIONS = "classifications"


class LookupCache:
    """
    Namespaced cache for product and customer lookups.

    Keys are laid out as "<prefix>:<namespace>:<key>". Redis failures are
    logged and treated as cache misses.
    """

    def __init__(self, client: redis.Redis, prefix: str = "fd_calc", ttl_seconds: int = 3600) -> None:
        """
        Initialize lookup cache.

        Args:
            client: Redis client created with decode_responses=True
            prefix: Key prefix shared by all namespaces
            ttl_seconds: Expiry applied to every entry
        """
        self.client = client
        self.prefix = prefix
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "LookupCache | None":
        """
        Create a cache from settings.

        Returns:
            LookupCache, or None when no Redis URL is configured
        """
        if not settings.redis_url:
            return None
        client = redis.Redis.from_url(settings.redis_url, decode_responses=True)
        return cls(client, prefix=settings.cache_prefix, ttl_seconds=settings.cache_ttl_seconds)

    def _key(self, namespace: str, key: object) -> str:
        return f"{self.prefix}:{namespace}:{key}"

    def get(self, namespace: str, key: object) -> str | None:
        """Return the cached raw value, or None on miss."""
        try:
            return self.client.get(self._key(namespace, key))
        except redis.RedisError as e:
            logger.error(f"Cache read failed for {namespace}:{key}: {e}")
            return None

    def get_model(self, namespace: str, key: object, model: type[ModelT]) -> ModelT | None:
        """Return a cached model, or None on miss or undecodable entry."""
        raw = self.get(namespace, key)
        if raw is None:
            return None
        try:
            return model.model_validate_json(raw)
        except ValueError as e:
            logger.warning(f"Discarding undecodable cache entry {namespace}:{key}: {e}")
            self.invalidate(namespace, key)
            return None

    def set(self, namespace: str, key: object, value: str | BaseModel) -> None:
        """Store a value with the configured TTL."""
        if isinstance(value, BaseModel):
            value = value.model_dump_json()
        try:
            self.client.set(self._key(namespace, key), value, ex=self.ttl_seconds)
        except redis.RedisError as e:
            logger.error(f"Cache write failed for {namespace}:{key}: {e}")

    def invalidate(self, namespace: str, key: object) -> bool:
        """
        Invalidate a single entry.

        Returns:
            True if an entry was removed
        """
        try:
            deleted = self.client.delete(self._key(namespace, key))
        except redis.RedisError as e:
            logger.error(f"Failed to invalidate {namespace}:{key}: {e}")
            return False
        if deleted:
            logger.info(f"Cache invalidated: {self._key(namespace, key)}")
        return bool(deleted)

    def invalidate_namespace(self, namespace: str) -> int:
        """
        Invalidate every entry in a namespace.

        Returns:
            Number of removed entries
        """
        pattern = f"{self.prefix}:{namespace}:*"
        try:
            keys = list(self.client.scan_iter(match=pattern))
            deleted = self.client.delete(*keys) if keys else 0
        except redis.RedisError as e:
            logger.error(f"Failed to invalidate namespace {namespace}: {e}")
            return 0
        if deleted:
            logger.info(f"Cache invalidated: {deleted} {namespace} entr(ies)")
        return deleted

    def clear(self) -> int:
        """Invalidate all lookup namespaces."""
        return sum(
            self.invalidate_namespace(namespace)
            for namespace in (PRODUCTS, CLASSIFICATIONS)
        )
