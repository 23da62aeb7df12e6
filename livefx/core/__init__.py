"""Core state, command mapping and I/O plumbing."""
