"""
FastTranslation - database-backed translations with cache and file fallback

Laravel-inspired translator for Python applications:
- Translation lines stored in MongoDB, editable live while debugging
- Long-lived Redis cache in production
- Legacy JSON files for namespaced packages and as a fallback for empty groups
- Missing keys recorded back to the database for translators
- Locale fallback chain and pluralisation
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"
__url__ = "https://github.com/patrikmojzis/fast-translation"

from .app_provider import boot
from .config import TranslationConfig
from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .core.localization import __, set_locale, get_locale, trans, trans_choice
from .exceptions import *  # noqa: F401,F403
