class TranslationException(Exception):
    """Base class for translator misuse. Missing lines are never raised, only returned as the key."""


class TranslatorNotBootedException(TranslationException, RuntimeError):
    def __init__(self):
        super().__init__("Translator is not configured. Call `boot()` or `set_translator()` first.")
