"""Shared helpers: registration key codec, URLs, key files, CLI output."""
