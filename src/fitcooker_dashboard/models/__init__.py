"""Record and view-model dataclasses shared by every layer of the dashboard."""
