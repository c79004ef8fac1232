from typing import Any, Dict, Optional, TYPE_CHECKING

from fast_translation.decorators.singleton_decorator import singleton

if TYPE_CHECKING:
    from fast_translation.core.translator import Translator


@singleton
class Application:
    """
    Singleton container holding the booted translator and the arguments it was booted with.
    """

    def __init__(self):
        self._translator: Optional['Translator'] = None
        self._boot_args: Dict[str, Any] = {}

    def set_translator(self, translator: 'Translator') -> None:
        self._translator = translator

    def get_translator(self) -> Optional['Translator']:
        return self._translator

    def reset(self) -> None:
        """Reset the application state (useful for testing)."""
        self._translator = None
        self._boot_args.clear()

    def set_boot_args(self, **kwargs) -> None:
        self._boot_args = kwargs

    def get_boot_args(self) -> Dict[str, Any]:
        return self._boot_args

    def is_booted(self) -> bool:
        return len(self._boot_args.keys()) > 0
