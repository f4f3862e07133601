"""Core pipeline for gale: fetch, normalize, format and write."""
