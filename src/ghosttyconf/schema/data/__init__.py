"""Bundled schema artifacts."""
