"""
In-memory record store backed by one JSON file per collection.

Collections are loaded once at startup and every mutation rewrites the
touched collection's file wholesale. There is no write-ahead log: a crash
between a mutation and its flush loses the mutation, and unless
atomic_writes is enabled a crash mid-write can leave a truncated file.
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import Callable, Dict, Generic, Iterator, List, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from app.database.records import Record
from app.modules.caregivers.models import Caregiver
from app.modules.communities.models import Community
from app.modules.events.models import Event
from app.modules.posts.models import Post
from app.modules.study_groups.models import StudyGroup
from app.modules.users.models import User

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class Collection(Generic[RecordT]):
    """A list of typed records guarded by a lock and mirrored to a JSON file."""

    def __init__(self, name: str, model: Type[RecordT], path: Path, atomic_writes: bool = False):
        self.name = name
        self.model = model
        self.path = path
        self.atomic_writes = atomic_writes
        self.lock = threading.RLock()
        self._records: List[RecordT] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(list(self._records))

    def all(self) -> List[RecordT]:
        return list(self._records)

    def get(self, record_id: str) -> Optional[RecordT]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        for record in self._records:
            if predicate(record):
                return record
        return None

    def add(self, record: RecordT) -> RecordT:
        self._records.append(record)
        return record

    def remove(self, record: RecordT) -> None:
        self._records.remove(record)

    def load(self) -> None:
        """Populate from disk. A missing or unreadable file leaves the collection empty."""
        self._records = []
        if not self.path.exists():
            logger.info("No %s file at %s, starting empty", self.name, self.path)
            return
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s from %s (%s); starting empty", self.name, self.path, e)
            return
        if not isinstance(raw, list):
            logger.warning("%s does not hold a JSON array; starting empty", self.path)
            return
        for item in raw:
            try:
                self._records.append(self.model.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping invalid %s record: %s", self.name, e)

    def dumps(self) -> str:
        return json.dumps([r.model_dump(mode="json") for r in self._records], indent=2)

    def save(self) -> bool:
        """Overwrite the backing file. Failures are logged and reported, never raised."""
        payload = self.dumps()
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if self.atomic_writes:
                fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.name}.", suffix=".tmp")
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_path, self.path)
                tmp_path = None
            else:
                self.path.write_text(payload, encoding="utf-8")
            return True
        except OSError:
            logger.exception("Failed to save %s to %s", self.name, self.path)
            return False
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)


class RecordStore:
    """Owns every collection for the lifetime of the process."""

    def __init__(self, data_dir: Union[str, Path], atomic_writes: bool = False):
        self.data_dir = Path(data_dir)

        def collection(name: str, model: Type[RecordT]) -> Collection[RecordT]:
            return Collection(name, model, self.data_dir / f"{name}.json", atomic_writes)

        self.users: Collection[User] = collection("users", User)
        self.events: Collection[Event] = collection("events", Event)
        self.communities: Collection[Community] = collection("communities", Community)
        self.caregivers: Collection[Caregiver] = collection("caregivers", Caregiver)
        self.posts: Collection[Post] = collection("posts", Post)
        self.study_groups: Collection[StudyGroup] = collection("study_groups", StudyGroup)

    @property
    def collections(self) -> Dict[str, Collection]:
        # Lock acquisition follows this order.
        return {
            c.name: c
            for c in (self.users, self.events, self.communities, self.caregivers, self.posts, self.study_groups)
        }

    def load(self) -> None:
        for collection in self.collections.values():
            collection.load()
            logger.info("Loaded %d %s", len(collection), collection.name)

    def save(self) -> bool:
        ok = True
        for collection in self.collections.values():
            with collection.lock:
                ok = collection.save() and ok
        return ok

    @contextmanager
    def transaction(self, *touched: Collection):
        """
        Hold the locks of the touched collections for a mutate-then-persist
        sequence and flush them when the block exits cleanly.
        """
        ordered = [c for c in self.collections.values() if any(c is t for t in touched)]
        with ExitStack() as stack:
            for collection in ordered:
                stack.enter_context(collection.lock)
            yield
            for collection in ordered:
                collection.save()
