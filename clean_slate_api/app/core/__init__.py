"""Configuration, logging, errors and the in‑memory record store."""
