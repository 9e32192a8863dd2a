"""Find files with identical content and optionally collapse them into symlinks."""
