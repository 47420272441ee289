def can_mutate(record, caller: str | None) -> bool:
    """True when caller is the record's author.

    Exact comparison against ``record.author_email``: no case folding and
    no role that overrides ownership.
    """
    return caller is not None and record.author_email == caller
