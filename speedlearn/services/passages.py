"""In-memory catalog of reading passages."""

import json
import logging
import random
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import ValidationError

from speedlearn.models.enums import Difficulty
from speedlearn.schemas.passage import Module, Passage

logger = logging.getLogger(__name__)


class PassageCatalogError(Exception):
    """Raised when a passage file cannot be loaded."""


class PassageCatalog:
    """Read-only lookup over a fixed set of passages and the modules grouping them."""

    def __init__(
        self,
        passages: Iterable[Passage] = (),
        modules: Iterable[Module] = (),
    ) -> None:
        self._passages: dict[str, Passage] = {}
        for passage in passages:
            if passage.id in self._passages:
                raise PassageCatalogError(f"Duplicate passage id: {passage.id}")
            self._passages[passage.id] = passage

        self._modules: dict[str, Module] = {}
        for module in modules:
            if module.id in self._modules:
                raise PassageCatalogError(f"Duplicate module id: {module.id}")
            missing = [pid for pid in module.passage_ids if pid not in self._passages]
            if missing:
                raise PassageCatalogError(
                    f"Module {module.id} references unknown passages: {', '.join(missing)}"
                )
            self._modules[module.id] = module

    @classmethod
    def from_json_file(cls, path: Path) -> "PassageCatalog":
        """
        Load passages, and optionally modules, from a JSON file.

        The file holds either a list of passages or an object with a
        ``passages`` list and an optional ``modules`` list. Keys may use
        camelCase (``wordCount``, ``idealWPM``, ``passageIds``) or snake_case.

        Raises:
            PassageCatalogError: If the file is missing, is not JSON, a
                passage or module fails validation, or a module names a
                passage the file does not define.
        """
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise PassageCatalogError(f"Cannot read passages from {path}: {e}") from e

        if isinstance(raw, dict):
            items = raw.get("passages", [])
            module_items = raw.get("modules", [])
        else:
            items, module_items = raw, []

        if not isinstance(items, list) or not isinstance(module_items, list):
            raise PassageCatalogError(f"Expected a list of passages in {path}")

        try:
            passages = [Passage.model_validate(item) for item in items]
        except ValidationError as e:
            raise PassageCatalogError(f"Invalid passage in {path}: {e}") from e

        try:
            modules = [Module.model_validate(item) for item in module_items]
        except ValidationError as e:
            raise PassageCatalogError(f"Invalid module in {path}: {e}") from e

        logger.info(
            "Loaded %d passages in %d modules from %s", len(passages), len(modules), path
        )
        return cls(passages, modules)

    def __len__(self) -> int:
        return len(self._passages)

    def __contains__(self, passage_id: object) -> bool:
        return passage_id in self._passages

    def all(self) -> List[Passage]:
        return list(self._passages.values())

    def get(self, passage_id: str) -> Optional[Passage]:
        return self._passages.get(passage_id)

    def by_difficulty(self, difficulty: Difficulty) -> List[Passage]:
        return [p for p in self._passages.values() if p.difficulty == difficulty]

    def by_category(self, category: str) -> List[Passage]:
        wanted = category.lower()
        return [p for p in self._passages.values() if p.category.lower() == wanted]

    def modules(self) -> List[Module]:
        return list(self._modules.values())

    def get_module(self, module_id: str) -> Optional[Module]:
        return self._modules.get(module_id)

    def by_module(self, module_id: str) -> List[Passage]:
        """Passages of a module in the module's order; empty for an unknown module."""
        module = self._modules.get(module_id)
        if module is None:
            return []
        return [self._passages[pid] for pid in module.passage_ids]

    def pick_random(
        self,
        difficulty: Optional[Difficulty] = None,
        rng: Optional[random.Random] = None,
        module: Optional[str] = None,
    ) -> Optional[Passage]:
        """
        Pick a passage at random.

        Args:
            difficulty: Only consider passages of this difficulty.
            rng: Random source; the module-level generator when None.
            module: Only consider passages of this module id.

        Returns:
            A matching passage, or None when nothing matches.
        """
        pool = self.by_module(module) if module is not None else self.all()
        if difficulty:
            pool = [p for p in pool if p.difficulty == difficulty]
        if not pool:
            return None
        return (rng or random).choice(pool)
