"""Redis Persistence Infrastructure."""

from ecosort.infrastructure.persistence_redis.state_storage_redis import RedisStateStorage

__all__ = ["RedisStateStorage"]
