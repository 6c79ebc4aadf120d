"""Debug representation of date ranges."""


def format_range(date_range) -> str:
    """Render as 'first..last', adding ';step' when the step is not 1."""
    if date_range.step == 1:
        return f"{date_range.first}..{date_range.last}"
    return f"{date_range.first}..{date_range.last};{date_range.step}"
