"""
Prompts Module - Prompt templates for explanation generation.

This module provides:
- PromptLoader: Class to load prompts from markdown files
- All prompt templates as markdown files

Usage:
    from prompts import PromptLoader, get_prompt

    loader = PromptLoader()
    prompt = loader.format("explanation", event_summary="...", ...)

Prompt Files:
- explanation.md: Plain-English explanation of an already-computed causal mapping
"""

from ._loader import PromptLoader, get_prompt, list_prompts

__all__ = [
    "PromptLoader",
    "get_prompt",
    "list_prompts",
]
