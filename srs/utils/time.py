import math
from datetime import timedelta

from django.utils import timezone

def to_local_iso(dt):
    if timezone.is_aware(dt):
        return timezone.localtime(dt).isoformat()
    return dt.isoformat()

def review_date(now):
    """Calendar date of a review instant, in the project time zone."""
    if timezone.is_aware(now):
        return timezone.localdate(now)
    return now.date()

def due_date_for(now, interval_days):
    # fractional intervals are truncated to whole days
    return review_date(now) + timedelta(days=math.floor(interval_days))
