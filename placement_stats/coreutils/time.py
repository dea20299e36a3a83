from datetime import date, datetime


def parse_date(value: str) -> date:
    """Parse an ISO date or ISO timestamp string into a calendar date."""
    text = value.strip()
    if len(text) > 10:
        # Timestamps keep only their date part
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    return date.fromisoformat(text)


def format_date(d: date) -> str:
    """Format a date as e.g. '15 Mar 2024'."""
    return f"{d.day} {d.strftime('%b')} {d.year}"
