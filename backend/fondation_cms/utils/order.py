MOVE_DIRECTIONS = {"up": -1, "down": 1}


def can_move(items, index, direction):
    """
    Whether the item at `index` can move one step in `direction`.
    Mirrors the disabled state of the move buttons at the list edges.
    """
    step = MOVE_DIRECTIONS.get(direction)
    if step is None:
        return False
    return 0 <= index < len(items) and 0 <= index + step < len(items)


def swap_adjacent(items, index, direction):
    """
    Swaps the item at `index` with its neighbour in place.
    Returns False (and leaves the list untouched) at the boundaries.
    """
    if direction not in MOVE_DIRECTIONS:
        raise ValueError(f"Unknown move direction: {direction}")

    if not can_move(items, index, direction):
        return False

    other = index + MOVE_DIRECTIONS[direction]
    items[index], items[other] = items[other], items[index]
    return True
