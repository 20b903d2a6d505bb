from typing import Optional

import pandas as pd

# Epoch strings longer than this many digits are taken to be milliseconds.
# This is a length heuristic, not a format discriminator: a seconds value
# past the year 2286 would be misread.
MS_DIGIT_THRESHOLD = 10

def resolve_time(raw) -> Optional[int]:
    """
    Resolve a raw timestamp field to whole seconds since the Unix epoch.

    Args:
        raw: Field as read from the source. Digit-only strings are epoch
            seconds (or milliseconds when longer than MS_DIGIT_THRESHOLD
            digits); anything else goes through pandas' date parser.

    Returns:
        Epoch seconds (UTC), or None when the value cannot be resolved.
        Never raises.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None

    if text.isascii() and text.isdigit():
        value = int(text)
        if len(text) > MS_DIGIT_THRESHOLD:
            return value // 1000
        return value

    try:
        ts = pd.to_datetime(text, utc=True)
    except (ValueError, TypeError, OverflowError):
        return None

    if pd.isna(ts):
        return None
    # Floor to whole seconds; Timestamp.value is ns since epoch in UTC
    return int(ts.value // 1_000_000_000)
