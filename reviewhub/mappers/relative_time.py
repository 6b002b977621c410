from datetime import datetime, timezone


def relative_time(submitted_at: datetime, now: datetime | None = None) -> str:
    """Describe how long ago a review was submitted, e.g. "3 weeks ago".

    Months are 30 days and years 365 days. Future timestamps read as "today".
    """
    if now is None:
        now = datetime.now(timezone.utc)
    if submitted_at.tzinfo is None:
        submitted_at = submitted_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    days = max((now - submitted_at).days, 0)
    weeks = days // 7
    months = days // 30
    years = days // 365

    if days == 0:
        return "today"
    if days == 1:
        return "yesterday"
    if days < 7:
        return f"{days} days ago"
    if weeks < 4:
        return "a week ago" if weeks == 1 else f"{weeks} weeks ago"
    if months < 12:
        # 28-29 days: four weeks but still under one 30-day month
        if months <= 1:
            return "a month ago"
        return f"{months} months ago"
    return "a year ago" if years <= 1 else f"{years} years ago"
