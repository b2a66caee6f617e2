from typing import Optional


def move_next(cursor: Optional[int], length: int) -> Optional[int]:
    if length <= 0:
        return None
    if cursor is None:
        return 0
    cursor %= length
    if cursor == length - 1:
        return 0
    return cursor + 1


def move_previous(cursor: Optional[int], length: int) -> Optional[int]:
    # an unset cursor lands on the first entry in both directions
    if length <= 0:
        return None
    if cursor is None:
        return 0
    cursor %= length
    if cursor == 0:
        return length - 1
    return cursor - 1
