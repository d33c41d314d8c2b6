# core/formatters.py

# all pure text utilities
# must never import from models!

import datetime

LIST_DELIMITER = ", "

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


# === delimited list fields ===

# Strengths and weaknesses are edited as one line of text. Joining and splitting on the same
# delimiter round-trips unless an individual entry itself contains the delimiter.


def join_delimited(items: list[str], delimiter: str = LIST_DELIMITER) -> str:
    return delimiter.join(items)


def split_delimited(text: str, delimiter: str = LIST_DELIMITER) -> list[str]:
    if text == "":
        return []

    return text.split(delimiter)


# === date formatters ===


def format_record_date(date_str: str) -> str:
    try:
        record_date = datetime.date.fromisoformat(date_str)
    except ValueError:
        return date_str

    return record_date.strftime("%a, %b %d, %Y")
