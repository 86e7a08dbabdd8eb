"""Build a documentation book with a pinned or system-installed mdbook."""
