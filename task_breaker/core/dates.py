from datetime import date, datetime


def today() -> date:
    return date.today()


def parse_day(value: str) -> date:
    """
    Strict "YYYY-MM-DD", the format the page's date picker sends.
    A timestamp is refused: its UTC date can be a day off from the
    calendar day the user picked.
    """
    value = (value or "").strip()
    if len(value) != 10:
        raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
    return date.fromisoformat(value)


def parse_date(value: str) -> date:
    """
    Lenient form for model answers: accepts "YYYY-MM-DD" or a full
    ISO-8601 timestamp and returns the date part as written.
    Raises ValueError otherwise.
    """
    value = (value or "").strip()
    if len(value) <= 10:
        return date.fromisoformat(value)
    return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
