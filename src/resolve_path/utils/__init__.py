"""Utility functions for resolve_path."""

from resolve_path.utils.paths import as_path, as_text, is_tilde_path, tilde_remainder

__all__ = ["as_path", "as_text", "is_tilde_path", "tilde_remainder"]
