from abc import abstractmethod

from fast_translation.contracts.translation_loader import TranslationLoader


class TranslationStore(TranslationLoader):
    """A loader that also accepts missing-key reports for translators to fill in later."""

    @abstractmethod
    async def add_translation(self, locale: str, group: str, key: str) -> None:
        """
        Register `key` as missing for `(locale, group)`.

        Must tolerate keys it has never seen and repeated reports of the same key.
        """
        pass
