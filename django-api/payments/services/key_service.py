"""PIX key registry - selection policy and capacity/uniqueness rules."""

import logging
import random
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from core.errors import MissingFieldsError, ValidationError
from core.ports import Clock, IdFactory, new_id, utcnow
from payments.domain import KeyKind, PaymentKey
from payments.domain.errors import (
    DuplicateKeyError,
    InvalidKeyKindError,
    KeyCapacityError,
    KeyNotFoundError,
)
from payments.stores.interfaces import PaymentKeyStore

logger = logging.getLogger(__name__)

MAX_KEYS = 5
UPDATABLE_FIELDS = ("key", "kind", "name", "active")


def parse_kind(value: Any) -> KeyKind:
    try:
        return KeyKind(value)
    except ValueError as exc:
        raise InvalidKeyKindError(str(value)) from exc


class KeyService:
    """Service for PIX key administration and random assignment."""

    def __init__(
        self,
        store: PaymentKeyStore,
        rng: random.Random | None = None,
        clock: Clock = utcnow,
        id_factory: IdFactory = new_id,
        max_keys: int = MAX_KEYS,
    ) -> None:
        self._store = store
        self._rng = rng or random.Random()
        self._clock = clock
        self._new_id = id_factory
        self._max_keys = max_keys

    def list_keys(self) -> list[PaymentKey]:
        with self._store.atomic():
            return self._store.list_keys()

    def count_active(self) -> int:
        with self._store.atomic():
            return len(self._store.list_active())

    def add_key(self, key: str, kind: str, name: str) -> PaymentKey:
        """Register a new active key.

        Raises:
            MissingFieldsError: If key, kind or name is empty.
            InvalidKeyKindError: If kind is not a known key format.
            DuplicateKeyError: If the key string is already registered.
            KeyCapacityError: If the registry is full.
        """
        if not key or not kind or not name:
            raise MissingFieldsError("key", "type", "name")
        key_kind = parse_kind(kind)

        with self._store.atomic():
            if self._store.find_by_key(key) is not None:
                raise DuplicateKeyError()
            if self._store.count() >= self._max_keys:
                raise KeyCapacityError(self._max_keys)

            payment_key = PaymentKey(
                id=self._new_id(),
                key=key,
                kind=key_kind,
                name=name,
                active=True,
                created_at=self._clock(),
            )
            self._store.save(payment_key)

        logger.info("PIX key %s added (%s)", payment_key.id, key_kind.value)
        return payment_key

    def update_key(self, key_id: str, **fields: Any) -> PaymentKey:
        """Merge the supplied fields into an existing key.

        Only ``key``, ``kind``, ``name`` and ``active`` are considered;
        anything else is ignored.

        Raises:
            MissingFieldsError: If ``key`` or ``name`` is an empty string.
            KeyNotFoundError: If no key has this ID.
            DuplicateKeyError: If ``key`` belongs to another registered key.
            InvalidKeyKindError: If ``kind`` is not a known key format.
        """
        changes = {
            name: value
            for name, value in fields.items()
            if name in UPDATABLE_FIELDS and value is not None
        }
        blank = [name for name in ("key", "name") if changes.get(name) == ""]
        if blank:
            raise MissingFieldsError(*blank)
        if "kind" in changes:
            changes["kind"] = parse_kind(changes["kind"])
        if "active" in changes and not isinstance(changes["active"], bool):
            raise ValidationError("active must be a boolean")

        with self._store.atomic():
            current = self._store.get_key(key_id)
            if current is None:
                raise KeyNotFoundError(key_id)
            if "key" in changes:
                holder = self._store.find_by_key(changes["key"])
                if holder is not None and holder.id != key_id:
                    raise DuplicateKeyError()

            updated = replace(current, **changes, updated_at=self._clock())
            self._store.save(updated)

        logger.info("PIX key %s updated: %s", key_id, ", ".join(sorted(changes)) or "-")
        return updated

    def remove_key(self, key_id: str) -> None:
        """Raises KeyNotFoundError if no key has this ID."""
        with self._store.atomic():
            if not self._store.delete(key_id):
                raise KeyNotFoundError(key_id)
        logger.info("PIX key %s removed", key_id)

    def select_random(self) -> PaymentKey | None:
        """Pick one active key uniformly at random, or None if none is active."""
        with self._store.atomic():
            active = self._store.list_active()
            if not active:
                return None
            return self._rng.choice(active)

    def seed(self, entries: Iterable[Mapping[str, str]]) -> list[PaymentKey]:
        """Register startup keys, skipping entries that are already present."""
        seeded = []
        for entry in entries:
            with self._store.atomic():
                if self._store.find_by_key(entry["key"]) is not None:
                    continue
                seeded.append(self.add_key(entry["key"], entry["type"], entry["name"]))
        return seeded
