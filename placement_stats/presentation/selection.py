"""
Expand/collapse selection state

The caller holds the currently selected identifier (or None); these
helpers compute the next value. At most one item is expanded at a time.
"""

from typing import Optional


def toggle_selection(current: Optional[str], clicked: str) -> Optional[str]:
    """Clicking the expanded item collapses it, any other item replaces it"""
    if current == clicked:
        return None
    return clicked


def is_expanded(current: Optional[str], item_id: str) -> bool:
    return current is not None and current == item_id
