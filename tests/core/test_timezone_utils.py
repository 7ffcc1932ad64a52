import time
from datetime import datetime, timedelta

from app.core.setup_events import SetupStepCompleted
from app.core.timezone_utils import utcnow


def test_utcnow_is_naive_utc():
    now = utcnow()

    assert now.tzinfo is None
    assert abs(now - (datetime(1970, 1, 1) + timedelta(seconds=time.time()))) < timedelta(seconds=5)


def test_setup_event_timestamp_uses_utcnow():
    event = SetupStepCompleted(club_id="c1", step="resources")

    assert event.timestamp.tzinfo is None
    assert utcnow() - event.timestamp < timedelta(seconds=5)
