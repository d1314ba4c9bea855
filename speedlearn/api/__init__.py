"""HTTP API for speedlearn."""
