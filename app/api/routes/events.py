import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_store
from app.core.auth import get_current_user, require_organizer
from app.core.store import DataStore
from app.models.event import Event
from app.models.user import User
from app.schemas.event import EventCreate, EventUpdate, EventPublic, EventWithParticipants
from app.schemas.registration import RegistrationPublic, RegistrationWithEvent

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


def _get_event_or_404(store: DataStore, event_id: int) -> Event:
    event = store.find_event_by_id(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


def _require_owner(event: Event, user: User) -> None:
    if event.organizer_id != user.id:
        raise HTTPException(status_code=403, detail="Only the event owner can do this")


def _is_full(event: Event) -> bool:
    capacity = event.capacity
    if not isinstance(capacity, int) or capacity <= 0:
        return False
    return len(event.participants) >= capacity


@router.get("", response_model=list[EventPublic])
def list_events(store: DataStore = Depends(get_store)):
    return store.get_all_events()


@router.post("", response_model=EventPublic, status_code=201)
def create_event(
    payload: EventCreate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(require_organizer),
):
    fields = payload.model_dump()
    fields["title"] = fields["title"].strip()
    fields["organizer_id"] = current_user.id

    event = store.add_event(fields)
    logger.info("Event created id=%s organizer=%s", event.id, current_user.id)
    return event


# ✅ IMPORTANT: my-* routes BEFORE /events/{event_id}
@router.get("/my-registrations", response_model=list[RegistrationWithEvent])
def my_registrations(
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    out: list[RegistrationWithEvent] = []
    for reg in store.get_user_registrations(current_user.id):
        event = store.find_event_by_id(reg.event_id)
        out.append(
            RegistrationWithEvent(
                **reg.model_dump(),
                event=EventPublic.model_validate(event.model_dump()) if event else None,
            )
        )
    return out


@router.get("/my-events", response_model=list[EventPublic])
def my_events(
    store: DataStore = Depends(get_store),
    current_user: User = Depends(require_organizer),
):
    return [e for e in store.get_all_events() if e.organizer_id == current_user.id]


@router.get("/{event_id}", response_model=EventWithParticipants)
def get_event(event_id: int, store: DataStore = Depends(get_store)):
    event = store.get_event_with_participants(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.put("/{event_id}", response_model=EventPublic)
def update_event(
    event_id: int,
    payload: EventUpdate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    updates = payload.model_dump(exclude_unset=True)
    if updates.get("title"):
        updates["title"] = updates["title"].strip()

    with store.lock:
        event = _get_event_or_404(store, event_id)
        _require_owner(event, current_user)

        if updates.get("capacity") is not None and updates["capacity"] < len(event.participants):
            raise HTTPException(
                status_code=400,
                detail="Capacity cannot be lower than the current number of participants",
            )

        updated = store.update_event(event_id, updates)
        if not updated:
            raise HTTPException(status_code=404, detail="Event not found")
    return updated


@router.delete("/{event_id}")
def delete_event(
    event_id: int,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    event = _get_event_or_404(store, event_id)
    _require_owner(event, current_user)

    if not store.delete_event(event_id):
        raise HTTPException(status_code=404, detail="Event not found")

    logger.info("Event deleted id=%s by user=%s", event_id, current_user.id)
    return {"ok": True, "deleted_event_id": event_id}


@router.post("/{event_id}/register", response_model=RegistrationPublic, status_code=201)
def register_for_event(
    event_id: int,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    # checks and insert under one lock so concurrent requests cannot overbook
    with store.lock:
        event = _get_event_or_404(store, event_id)

        if store.is_user_registered_for_event(event.id, current_user.id):
            raise HTTPException(status_code=400, detail="Already registered for this event")

        if _is_full(event):
            raise HTTPException(status_code=409, detail="Event is full")

        registration = store.add_registration(event.id, current_user.id)
        if not registration:
            raise HTTPException(status_code=400, detail="Could not register for this event")

    logger.info("User %s registered for event %s", current_user.id, event.id)
    return registration
