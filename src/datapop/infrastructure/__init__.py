"""Infrastructure layer — document snapshot I/O and the workspace."""
