"""
PassionProfile -- a traveller's selected passion ids.

One instance per user session. The selection is read from the injected
key-value store when the profile is built and written back after every
mutation, as a JSON array of ids:

    ["relaxation-wellness", "gourmet-foodie"]

Storage trouble never reaches the caller. An unreadable or corrupt
value loads as "no selection" and a failed write keeps the in-memory
selection; both are logged.

Usage::

    from passions import PassionProfile, storage_key_for
    from services import create_store

    profile = PassionProfile(create_store(), storage_key=storage_key_for("u-42"))

    # or take the store backend and base key from settings
    profile = PassionProfile.from_settings(user_id="u-42")
    profile.toggle_passion("stargazing-hotspots")
    matcher.calculate_passion_score(hotel, profile.get_selected())
"""

import json
from typing import Any, List, Optional

from core.exceptions import StorageError
from core.logging import LoggerMixin
from passions.catalog import PassionCatalog, default_catalog
from passions.models import PassionCategory
from services.profile_store import KeyValueStore, create_store

DEFAULT_STORAGE_KEY = "hotelFinder_passions"


def storage_key_for(user_id: Optional[str] = None, base_key: str = DEFAULT_STORAGE_KEY) -> str:
    """Storage key scoped to one user; the bare base key when anonymous."""
    if not user_id:
        return base_key
    return f"{base_key}:{user_id}"


class PassionProfile(LoggerMixin):
    """
    Ordered, duplicate-free selection of passion ids backed by a store.

    Not thread-safe; expected to be driven by one session at a time.
    """

    def __init__(
        self,
        store: KeyValueStore,
        catalog: Optional[PassionCatalog] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._store = store
        self._catalog = catalog or default_catalog()
        self.storage_key = storage_key
        self._selected: List[str] = []
        self.load()

    @classmethod
    def from_settings(
        cls,
        user_id: Optional[str] = None,
        settings: Optional[Any] = None,
        store: Optional[KeyValueStore] = None,
        catalog: Optional[PassionCatalog] = None,
    ) -> "PassionProfile":
        """
        Build a profile from ``config.Settings``.

        The store comes from ``create_store(settings)`` unless one is passed,
        and the key is ``profile_storage_key`` scoped to ``user_id``.
        """
        if settings is None:
            from config.settings import get_settings
            settings = get_settings()
        if store is None:
            store = create_store(settings)
        return cls(
            store,
            catalog=catalog,
            storage_key=storage_key_for(user_id, settings.profile_storage_key),
        )

    # =========================================================================
    # Persistence
    # =========================================================================

    def load(self) -> List[str]:
        """
        Re-read the selection from the store.

        Absent, unreadable or corrupt data all load as an empty selection.
        """
        self._selected = self._read()
        return self.get_selected()

    def _read(self) -> List[str]:
        try:
            raw = self._store.get(self.storage_key)
        except StorageError as e:
            self.logger.warning(
                "Could not read passion selection",
                storage_key=self.storage_key,
                error=str(e),
            )
            return []

        if raw is None or raw == "":
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError, RecursionError) as e:
            self.logger.warning(
                "Corrupt passion selection, resetting",
                storage_key=self.storage_key,
                error=str(e),
            )
            return []

        if not isinstance(data, list):
            self.logger.warning(
                "Passion selection is not a list, resetting",
                storage_key=self.storage_key,
                payload_type=type(data).__name__,
            )
            return []

        selected: List[str] = []
        for passion_id in data:
            if isinstance(passion_id, str) and passion_id not in selected:
                selected.append(passion_id)
        return selected

    def _save(self) -> None:
        try:
            self._store.set(self.storage_key, json.dumps(self._selected))
        except StorageError as e:
            self.logger.error(
                "Could not save passion selection",
                storage_key=self.storage_key,
                error=str(e),
            )

    # =========================================================================
    # Selection
    # =========================================================================

    def toggle_passion(self, passion_id: str) -> List[str]:
        """
        Add the id if absent, remove it if present, then persist.

        Non-string ids are ignored; they could never be loaded back.
        """
        if not isinstance(passion_id, str):
            self.logger.debug("Ignoring non-string passion id", passion_id=repr(passion_id))
            return self.get_selected()
        if passion_id in self._selected:
            self._selected.remove(passion_id)
        else:
            self._selected.append(passion_id)
        self._save()
        return self.get_selected()

    def is_selected(self, passion_id: str) -> bool:
        return passion_id in self._selected

    def get_selected(self) -> List[str]:
        """Selected ids in the order they were picked (a copy)."""
        return list(self._selected)

    def clear_all(self) -> List[str]:
        self._selected = []
        self._save()
        return self.get_selected()

    def get_selected_passions(self) -> List[PassionCategory]:
        """Selected ids resolved through the catalog; unknown ids dropped."""
        return self._catalog.resolve(self._selected)

    # =========================================================================
    # Display helpers
    # =========================================================================

    @property
    def count(self) -> int:
        return len(self._selected)

    @property
    def has_selections(self) -> bool:
        return bool(self._selected)

    def selection_summary(self) -> str:
        """One-line summary for the selector footer."""
        passions = self.get_selected_passions()
        if not passions:
            return "No passions selected"
        noun = "passion" if len(passions) == 1 else "passions"
        names = ", ".join(p.name for p in passions)
        return f"{len(passions)} {noun} selected: {names}"

    def __len__(self) -> int:
        return self.count

    def __contains__(self, passion_id: object) -> bool:
        return passion_id in self._selected
