"""
Unsaved editor drafts kept in the session.

A draft belongs to the view that created it. Once the user moves to a
different view without saving, the draft is discarded so it cannot resurface
pre-filled in another editor.
"""

import logging
from typing import MutableMapping, Optional

from designdesk.navigation import NavigationState


logger = logging.getLogger(__name__)

DRAFT_PREFIXES = ("test_draft_", "draft_designer_id")


def draft_key_for_test(module_id: str, test_id: Optional[str]) -> str:
    return f"test_draft_{module_id}_{test_id or 'new'}"


def _same_view(previous: NavigationState, current: NavigationState) -> bool:
    return (previous.subsection, previous.id, previous.module_id, previous.mode) == (
        current.subsection, current.id, current.module_id, current.mode,
    )


def discard_drafts(
    session: MutableMapping,
    previous: NavigationState,
    current: NavigationState,
) -> list[str]:
    """
    Drop draft entries from ``session`` when navigation leaves the view.

    Returns:
        The removed keys (empty when the view did not change)
    """
    if _same_view(previous, current):
        return []

    stale = [key for key in list(session.keys()) if str(key).startswith(DRAFT_PREFIXES)]
    for key in stale:
        del session[key]
    if stale:
        logger.debug(f"Discarded {len(stale)} draft entries")
    return stale
