from functools import lru_cache

from roster.adapters.storage_factory import create_storage
from roster.components.students import KeyValueStoragePort, RosterStore
from roster.config.loader import load_config
from roster.config.models import RosterConfig


# --- Config ---
@lru_cache
def get_config() -> RosterConfig:
    return load_config()


# --- Storage ---
# One backend per process so the memory backend survives across requests.
@lru_cache
def get_storage() -> KeyValueStoragePort:
    return create_storage(get_config().storage)


# --- Services ---
def get_roster_store() -> RosterStore:
    return RosterStore(get_storage(), key=get_config().storage.key)
