import logging

from fast_translation.contracts.translation_store import TranslationStore


class MissingKeyRecorder:
    """Reports every default-namespace miss to the store. Deduplication is the store's job."""

    def __init__(self, store: TranslationStore):
        self.store = store

    async def record(self, locale: str, group: str, key: str) -> None:
        logging.debug(f"Missing translation `{key}` for locale `{locale}`")
        await self.store.add_translation(locale, group, key)
