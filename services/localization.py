"""
Localization of the labels node naming needs.
"""
from typing import Any, Dict, Optional, Sequence

import structlog

from core.constants import DEFAULT_TEXTS

logger = structlog.get_logger(__name__)


class ResourceManager:
    """Translates localization keys using a per-language text table."""

    def __init__(
        self,
        texts: Optional[Dict[str, str]] = None,
        language: str = 'en'
    ):
        """
        Initialize resource manager.

        Args:
            texts: Overrides merged on top of the default English texts
            language: Language the texts are written in
        """
        self.language = language
        self._texts = dict(DEFAULT_TEXTS)
        if texts:
            self._texts.update(texts)

    def translate(self, key: str, args: Optional[Sequence[Any]] = None) -> str:
        """
        Translate a key, formatting positional arguments into the text.

        Unknown keys translate to the key itself.
        """
        text = self._texts.get(key)
        if text is None:
            logger.debug("translation_missing", key=key, language=self.language)
            text = key

        if args:
            return text.format(*args)
        return text
