import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from fast_translation.config import TranslationConfig
from fast_translation.contracts.translation_store import TranslationStore
from fast_translation.database.mongo import get_translations_collection
from fast_translation.utils.translation_utils import undot

if TYPE_CHECKING:
    from motor.motor_asyncio import AsyncIOMotorCollection


class DatabaseLoader(TranslationStore):
    """
    MongoDB translation store.

    One document per line: `{locale, group, name, value, created_at, updated_at}`.
    Lines registered as missing carry `value: None` until someone translates them.
    """

    def __init__(
        self,
        config: Optional[TranslationConfig] = None,
        collection: Optional['AsyncIOMotorCollection'] = None,
        collection_name: Optional[str] = None,
    ):
        super().__init__()
        self.config = config or TranslationConfig.from_env()
        self._collection = collection
        self._collection_name = collection_name

    async def collection(self) -> 'AsyncIOMotorCollection':
        if self._collection is None:
            self._collection = await get_translations_collection(self._collection_name)
        return self._collection

    async def load(self, locale: str, group: str, namespace: Optional[str] = None) -> Dict[str, Any]:
        coll = await self.collection()
        cursor = coll.find(
            {"locale": locale, "group": group, "value": {"$ne": None}},
            {"name": 1, "value": 1},
        )
        rows = [(doc["name"], doc["value"]) async for doc in cursor]
        # Parents before children, so `a.b` always wins over a plain `a`
        return undot(sorted(rows, key=lambda row: row[0]))

    async def add_translation(self, locale: str, group: str, key: str) -> None:
        # Cached lines would never pick the new record up, so only record while live editing
        if self.config.uses_long_lived_cache:
            return

        name = self.item_name(group, key)
        if not name:
            logging.debug(f"Skipping missing translation `{key}`: no item in key")
            return

        coll = await self.collection()
        created_at = datetime.now(timezone.utc)
        await coll.update_one(
            {"locale": locale, "group": group, "name": name},
            {"$setOnInsert": {"value": None, "created_at": created_at, "updated_at": created_at}},
            upsert=True,
        )

    async def set_translation(self, locale: str, group: str, name: str, value: Optional[str]) -> None:
        coll = await self.collection()
        updated_at = datetime.now(timezone.utc)
        await coll.update_one(
            {"locale": locale, "group": group, "name": name},
            {
                "$set": {"value": value, "updated_at": updated_at},
                "$setOnInsert": {"created_at": updated_at},
            },
            upsert=True,
        )

    async def missing(self, locale: Optional[str] = None) -> List[Dict[str, Any]]:
        """Lines still waiting for a translation, oldest first."""
        query: Dict[str, Any] = {"value": None}
        if locale:
            query["locale"] = locale
        coll = await self.collection()
        cursor = coll.find(query, {"_id": 0, "locale": 1, "group": 1, "name": 1}).sort("created_at", 1)
        return [doc async for doc in cursor]

    @staticmethod
    def item_name(group: str, key: str) -> str:
        """Strip the leading `'<group>.'` from a full translation key."""
        prefix = f"{group}."
        if key.startswith(prefix):
            return key[len(prefix):]
        return key if key != group else ""
