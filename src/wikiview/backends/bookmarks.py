"""JSON file bookmark store."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from wikiview.backends.protocol import BookmarkStore
from wikiview.logging import get_logger
from wikiview.models.bookmark import Bookmark

logger = get_logger(__name__)

_BOOKMARK_LIST = TypeAdapter(list[Bookmark])


class JsonBookmarkStore(BookmarkStore):
    """Keep bookmarks as a JSON array in a single file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> list[Bookmark]:
        if not self.path.exists():
            return []
        try:
            return _BOOKMARK_LIST.validate_json(self.path.read_text(encoding="utf-8"))
        except ValidationError as e:
            logger.warning("Ignoring unreadable bookmark file %s: %s", self.path, e)
            return []

    def _dump(self, records: list[Bookmark]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [r.model_dump() for r in records]
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def save(self, record: Bookmark) -> None:
        records = [r for r in self._load() if r.title != record.title]
        records.append(record)
        self._dump(records)
        logger.info("Saved bookmark %r -> page %s", record.title, record.page_id)

    def entries(self) -> list[Bookmark]:
        return self._load()

    def get(self, title: str) -> Bookmark | None:
        for record in self._load():
            if record.title == title:
                return record
        return None
