"""HTTP API for server nodes."""
