"""Drag-and-drop reordering for the card list."""

from typing import List, Sequence, TypeVar
import logging

logger = logging.getLogger(__name__)

CardT = TypeVar('CardT')

def insert_before_from_pointer(pointer_y: float, target_top: float, target_height: float) -> bool:
    """Decide which side of the drop target a dragged card lands on.

    A pointer strictly above the vertical midpoint of the target's bounding
    box means "insert before"; on or below it means "insert after".
    """
    return pointer_y < target_top + target_height / 2

def reorder_cards(
    cards: Sequence[CardT],
    dragged_id: int,
    target_id: int,
    insert_before: bool
) -> List[CardT]:
    """Move the dragged card next to the target card.

    Args:
        cards: Current order; each item needs an ``id`` attribute
        dragged_id: Id of the card being dragged
        target_id: Id of the card it was dropped on
        insert_before: True to land before the target, False to land after it

    Returns:
        A new list in the resulting order. Unknown ids, or dropping a card on
        itself, return the order unchanged.
    """
    ordered = list(cards)
    if dragged_id == target_id:
        return ordered

    ids = [card.id for card in ordered]
    if dragged_id not in ids or target_id not in ids:
        logger.debug(f"Ignoring reorder of {dragged_id} onto {target_id}: card no longer present")
        return ordered

    dragged_index = ids.index(dragged_id)
    target_index = ids.index(target_id)

    dragged = ordered.pop(dragged_index)

    # Indices after dragged_index shifted left by one when it was removed
    if insert_before:
        insert_at = target_index if target_index < dragged_index else target_index - 1
    else:
        insert_at = target_index + 1 if target_index < dragged_index else target_index

    ordered.insert(insert_at, dragged)
    return ordered
