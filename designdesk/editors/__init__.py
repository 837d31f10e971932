"""
DesignDesk Editors - Form rules shared by the editor views.

This module provides:
- Per-entity validators returning inline error lists
- check_form: build a record from form data and validate it
- Debouncer: timer-based autosave coalescing
- discard_drafts: drop unsaved drafts when the view changes
"""

from .validation import (
    EMAIL_RE,
    JIRA_KEY_RE,
    validate_designer,
    validate_skill,
    validate_learning_module,
    validate_lesson,
    validate_test,
    validate_project,
    check_form,
)

from .autosave import Debouncer

from .drafts import DRAFT_PREFIXES, discard_drafts, draft_key_for_test

__all__ = [
    # Validation
    "EMAIL_RE",
    "JIRA_KEY_RE",
    "validate_designer",
    "validate_skill",
    "validate_learning_module",
    "validate_lesson",
    "validate_test",
    "validate_project",
    "check_form",
    # Autosave
    "Debouncer",
    # Drafts
    "DRAFT_PREFIXES",
    "discard_drafts",
    "draft_key_for_test",
]
