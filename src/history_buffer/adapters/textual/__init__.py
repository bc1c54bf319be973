"""Textual integration: key handling controller plus a demo app."""

from .controller import HistoryKeyResult, TextualHistoryAdapter, TextualHistoryHooks

__all__ = ["HistoryKeyResult", "TextualHistoryAdapter", "TextualHistoryHooks"]
