"""Terminal user interface for checklist-tui."""
