"""Parsing and serialization kernel for Steam stats dumps."""
