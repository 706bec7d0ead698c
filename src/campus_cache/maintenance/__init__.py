"""
Maintenance & Inspection.

Operations layered on any cache implementing InspectableCache:
    - Sweeps and evictions: clean_expired, evict_lru, evict_older_than
    - Inspection: get_all_entries, keys_by_age, keys_by_access_count
    - Bulk helpers: put_all, get_all, remove_all, refresh

Works through the cache's entries()/remove() API only. LRUCache is not
synchronized, so maintenance on a shared LRUCache must run under the
caller's lock like any other call.
"""

from campus_cache.maintenance.bulk import get_all, put_all, refresh, remove_all
from campus_cache.maintenance.inspection import (
    get_all_entries,
    keys_by_access_count,
    keys_by_age,
)
from campus_cache.maintenance.sweeper import (
    clean_expired,
    evict_lru,
    evict_older_than,
)

__all__ = [
    "clean_expired",
    "evict_lru",
    "evict_older_than",
    "get_all",
    "get_all_entries",
    "keys_by_access_count",
    "keys_by_age",
    "put_all",
    "refresh",
    "remove_all",
]
