from datetime import timedelta

from sqlalchemy import event

from app.models.activity import ProspectActivity
from app.models.base import utc_now
from app.models.photo import ProspectPhoto
from app.models.prospect import Prospect

_TICK = timedelta(microseconds=1)


def next_timestamp(previous):
    """Return "now", nudged forward so it is strictly after *previous*."""
    now = utc_now()
    if previous is not None and now <= previous:
        now = previous + _TICK
    return now


# created_at == updated_at on insert
@event.listens_for(Prospect, "before_insert")
def stamp_prospect_created(mapper, connection, target):
    now = utc_now()
    target.created_at = now
    target.updated_at = now


# Auto updated_at, strictly increasing per row
@event.listens_for(Prospect, "before_update")
def update_timestamp(mapper, connection, target):
    target.updated_at = next_timestamp(target.updated_at)


@event.listens_for(ProspectActivity, "before_insert")
def stamp_activity_created(mapper, connection, target):
    target.created_at = utc_now()
    if target.activity_date is None:
        target.activity_date = target.created_at


@event.listens_for(ProspectPhoto, "before_insert")
def stamp_photo_uploaded(mapper, connection, target):
    if target.uploaded_at is None:
        target.uploaded_at = utc_now()
