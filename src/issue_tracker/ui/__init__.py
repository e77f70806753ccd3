"""Terminal-facing collaborators: the fetch spinner and the selection loop."""
