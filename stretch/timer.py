# stretch/timer.py
import time

MAX_SECONDS = 7 * 24 * 3600  # one week; longer waits overflow time.sleep on some platforms


class UsageError(ValueError):
    """The duration argument is missing or malformed."""


def parse_duration(raw: str | None) -> int:
    """
    Turn the command-line argument into whole seconds.
    Accepts surrounding whitespace and a leading '+'; rejects anything
    that is not plain ASCII digits, negative, or longer than MAX_SECONDS.
    """
    if raw is None or not raw.strip():
        raise UsageError("missing duration")
    raw = raw.strip()
    digits = raw[1:] if raw[0] in "+-" else raw
    # int() alone would also take "1_000" and non-ASCII digits
    if not (digits.isascii() and digits.isdigit()):
        raise UsageError(f"invalid duration '{raw}': it must be a whole number of seconds")
    seconds = int(raw)
    if seconds < 0:
        raise UsageError(f"invalid duration '{raw}': it must not be negative")
    if seconds > MAX_SECONDS:
        raise UsageError(f"invalid duration '{raw}': it must be at most {MAX_SECONDS} seconds")
    return seconds


def format_hhmmss(seconds: int) -> str:
    # e.g. 3725 -> "01:02:05 (3725)"
    hours = seconds // 3600
    minutes = seconds % 3600 // 60
    secs = seconds % 60
    return f"{hours:02}:{minutes:02}:{secs:02} ({seconds})"


def wait(seconds: int, sleep=None):
    """Block for `seconds`. Zero returns straight away."""
    if seconds > 0:
        (sleep or time.sleep)(seconds)
