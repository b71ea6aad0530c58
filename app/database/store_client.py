from typing import Optional

from app.config import settings
from app.database.json_store import RecordStore


class StoreClient:
    _store: Optional[RecordStore] = None

    @classmethod
    def get_store(cls) -> RecordStore:
        if cls._store is None:
            cls._store = RecordStore(settings.data_dir, atomic_writes=settings.atomic_writes)
            cls._store.load()
        return cls._store

    @classmethod
    def reset_store(cls):
        cls._store = None


def get_store() -> RecordStore:
    return StoreClient.get_store()
