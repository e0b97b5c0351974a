"""In-memory store for users, events and registrations.

Every public method takes the store lock, so one instance can be shared by
FastAPI's worker threads. Nothing here raises on missing records: lookups
return ``None`` and failed writes return ``None`` or ``False``; the routes
turn those into HTTP errors.
"""

import functools
import logging
from threading import RLock
from typing import Any, Mapping

from app.models.event import Event
from app.models.registration import Registration
from app.models.user import User, utc_now
from app.schemas.event import EventWithParticipants
from app.schemas.user import UserPublic

logger = logging.getLogger(__name__)

# never taken from caller fields
_USER_MANAGED = ("id", "created_at")
_EVENT_MANAGED = ("id", "participants", "created_at", "updated_at")


def _locked(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


def _coerce_id(value: Any) -> int | None:
    """Accept ints and digit strings ("3"); anything else matches nothing."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def to_public(user: User) -> UserPublic:
    data = user.model_dump(exclude={"password"})
    return UserPublic.model_construct(**{k: data[k] for k in UserPublic.model_fields if k in data})


class DataStore:
    def __init__(self) -> None:
        self._lock = RLock()

        self.users: list[User] = []
        self._user_id_counter = 1

        self.events: list[Event] = []
        self._event_id_counter = 1

        self.registrations: list[Registration] = []
        self._registration_id_counter = 1

    @property
    def lock(self) -> RLock:
        """Held by callers that need several store calls to act as one."""
        return self._lock

    # ---------- users ----------

    @_locked
    def add_user(self, fields: Mapping[str, Any]) -> User:
        data = {k: v for k, v in fields.items() if k not in _USER_MANAGED}
        user = User.model_construct(id=self._user_id_counter, **data, created_at=utc_now())
        self._user_id_counter += 1
        self.users.append(user)
        logger.debug("user added id=%s", user.id)
        return user

    @_locked
    def find_user_by_email(self, email: str) -> User | None:
        return next((u for u in self.users if u.email == email), None)

    @_locked
    def find_user_by_id(self, user_id: int) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    @_locked
    def get_all_users(self) -> list[UserPublic]:
        return [to_public(u) for u in self.users]

    # ---------- events ----------

    @_locked
    def add_event(self, fields: Mapping[str, Any]) -> Event:
        data = {k: v for k, v in fields.items() if k not in _EVENT_MANAGED}
        now = utc_now()
        event = Event.model_construct(
            id=self._event_id_counter,
            **data,
            participants=[],
            created_at=now,
            updated_at=now,
        )
        self._event_id_counter += 1
        self.events.append(event)
        logger.debug("event added id=%s", event.id)
        return event

    @_locked
    def find_event_by_id(self, event_id: int | str) -> Event | None:
        eid = _coerce_id(event_id)
        if eid is None:
            return None
        return next((e for e in self.events if e.id == eid), None)

    @_locked
    def get_all_events(self) -> list[Event]:
        return list(self.events)

    @_locked
    def update_event(self, event_id: int | str, updates: Mapping[str, Any]) -> Event | None:
        eid = _coerce_id(event_id)
        index = self._event_index(eid)
        if index is None:
            return None

        current = self.events[index]
        changes = {k: v for k, v in updates.items() if k not in _EVENT_MANAGED}
        changes["updated_at"] = utc_now()

        updated = current.model_copy(update=changes)
        self.events[index] = updated
        logger.debug("event updated id=%s fields=%s", eid, sorted(changes))
        return updated

    @_locked
    def delete_event(self, event_id: int | str) -> bool:
        eid = _coerce_id(event_id)
        index = self._event_index(eid)
        if index is None:
            return False

        del self.events[index]
        before = len(self.registrations)
        self.registrations = [r for r in self.registrations if r.event_id != eid]
        logger.debug(
            "event deleted id=%s registrations_removed=%s",
            eid, before - len(self.registrations),
        )
        return True

    def _event_index(self, event_id: int | None) -> int | None:
        if event_id is None:
            return None
        for i, event in enumerate(self.events):
            if event.id == event_id:
                return i
        return None

    # ---------- registrations ----------

    @_locked
    def add_registration(self, event_id: int | str, user_id: int | str) -> Registration | None:
        """Register a user for an event.

        Returns None, storing nothing, when the pair is already registered or
        the event does not exist.
        """
        eid, uid = _coerce_id(event_id), _coerce_id(user_id)
        if eid is None or uid is None:
            return None

        if self.is_user_registered_for_event(eid, uid):
            return None

        event = self.find_event_by_id(eid)
        if event is None:
            return None

        registration = Registration.model_construct(
            id=self._registration_id_counter,
            event_id=eid,
            user_id=uid,
            registered_at=utc_now(),
        )
        self._registration_id_counter += 1
        self.registrations.append(registration)

        if uid not in event.participants:
            event.participants.append(uid)

        logger.debug("registration added id=%s event=%s user=%s", registration.id, eid, uid)
        return registration

    @_locked
    def get_user_registrations(self, user_id: int | str) -> list[Registration]:
        uid = _coerce_id(user_id)
        return [r for r in self.registrations if r.user_id == uid]

    @_locked
    def get_event_registrations(self, event_id: int | str) -> list[Registration]:
        eid = _coerce_id(event_id)
        return [r for r in self.registrations if r.event_id == eid]

    @_locked
    def is_user_registered_for_event(self, event_id: int | str, user_id: int | str) -> bool:
        eid, uid = _coerce_id(event_id), _coerce_id(user_id)
        return any(
            r.event_id == eid and r.user_id == uid
            for r in self.registrations
        )

    @_locked
    def get_event_with_participants(self, event_id: int | str) -> EventWithParticipants | None:
        event = self.find_event_by_id(event_id)
        if event is None:
            return None

        details = []
        for user_id in event.participants:
            user = self.find_user_by_id(user_id)
            if user is not None:
                details.append(to_public(user))

        return EventWithParticipants.model_construct(**event.model_dump(), participant_details=details)
