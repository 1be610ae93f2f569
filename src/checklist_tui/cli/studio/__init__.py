"""Full-screen applications."""

from checklist_tui.cli.studio.checklist import ChecklistApp, run_checklist

__all__ = ["ChecklistApp", "run_checklist"]
