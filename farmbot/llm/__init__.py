from __future__ import annotations

from .engine import CompletionClient, CompletionResult

__all__ = ["CompletionClient", "CompletionResult"]
