"""
File-backed persistence for the personal dictionary.
"""
import json
import os
from pathlib import Path
from typing import List, Optional

from yazim.config import settings
from yazim.utils.logger import get_logger

logger = get_logger("services.personal_dictionary")


class PersonalDictionaryStore:
    """
    Stores personal dictionary words as a JSON list.

    The store only reads and writes plain word lists; merging into the
    dictionary index is the spell-check service's job.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path) if path else Path(settings.SPELLCHECK_PERSONAL_DICT_PATH)

    def load(self) -> List[str]:
        """
        Read the stored words.

        Returns:
            Stored words, or an empty list if the file is missing or unreadable
        """
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to read personal dictionary", path=str(self.path), error=str(e))
            return []

        if not isinstance(data, list):
            logger.warning("Personal dictionary is not a JSON list, ignoring", path=str(self.path))
            return []

        words = [w for w in data if isinstance(w, str) and w.strip()]
        logger.info("Personal dictionary loaded", path=str(self.path), words=len(words))
        return words

    def save(self, words: List[str]) -> None:
        """
        Replace the stored words with an atomic write.

        Raises:
            OSError: If the file cannot be written
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")

        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(sorted(set(words)), f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

        logger.debug("Personal dictionary saved", path=str(self.path), words=len(words))
