"""Configuration, logging and the in‑memory entity store."""
