"""
Prompt Loader - Load and format prompts from markdown files.

Prompts live next to this module as .md files with {variable_name}
placeholders, so wording can be edited without touching code.
"""

import re
from pathlib import Path
from typing import Optional, Dict, Any

from loguru import logger


_VARIABLE_PATTERN = re.compile(r"\{([a-zA-Z_][a-zA-Z0-9_]*)\}")


class PromptLoader:
    """
    Load and format prompts from markdown files.

    Example:
        loader = PromptLoader()
        prompt = loader.format("explanation", event_summary="...", ...)
    """

    # Singleton instance
    _instance: Optional["PromptLoader"] = None

    def __new__(cls) -> "PromptLoader":
        """Singleton pattern - only one loader instance needed."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._prompts_dir = Path(__file__).parent
        self._cache: Dict[str, str] = {}
        self._initialized = True

        logger.debug(f"PromptLoader initialized with prompts dir: {self._prompts_dir}")

    @property
    def prompts_dir(self) -> Path:
        return self._prompts_dir

    def get(self, prompt_name: str) -> str:
        """
        Get a prompt template by name.

        Args:
            prompt_name: Name of the prompt (without .md extension)

        Returns:
            Raw prompt template string

        Raises:
            FileNotFoundError: If prompt file doesn't exist
        """
        if prompt_name in self._cache:
            return self._cache[prompt_name]

        prompt_path = self._prompts_dir / f"{prompt_name}.md"

        if not prompt_path.exists():
            raise FileNotFoundError(
                f"Prompt file not found: {prompt_path}\n"
                f"Available prompts: {self.list_prompts()}"
            )

        content = prompt_path.read_text(encoding="utf-8")
        self._cache[prompt_name] = content

        logger.debug(f"Loaded prompt: {prompt_name} ({len(content)} chars)")
        return content

    def format(self, prompt_name: str, **kwargs: Any) -> str:
        """
        Get a prompt and format it with variables.

        Args:
            prompt_name: Name of the prompt (without .md extension)
            **kwargs: Variables to substitute in the prompt

        Returns:
            Formatted prompt string

        Raises:
            ValueError: If a placeholder has no matching variable
        """
        template = self.get(prompt_name)

        try:
            return template.format(**kwargs)
        except KeyError as e:
            logger.error(f"Missing variable in prompt '{prompt_name}': {e}")
            logger.debug(f"Provided variables: {list(kwargs.keys())}")
            raise ValueError(
                f"Missing required variable {e} for prompt '{prompt_name}'"
            ) from e

    def list_prompts(self) -> list[str]:
        """List all available prompt names (without .md extension)."""
        return sorted(
            f.stem for f in self._prompts_dir.glob("*.md")
            if f.stem != "README"
        )

    def reload(self, prompt_name: str = None) -> None:
        """
        Clear cache to reload prompts from disk.

        Args:
            prompt_name: Specific prompt to reload, or None for all
        """
        if prompt_name:
            self._cache.pop(prompt_name, None)
            logger.debug(f"Cleared cache for prompt: {prompt_name}")
        else:
            self._cache.clear()
            logger.debug("Cleared all prompt cache")

    def get_variables(self, prompt_name: str) -> list[str]:
        """Unique placeholder names in a template, in order of appearance."""
        return list(dict.fromkeys(_VARIABLE_PATTERN.findall(self.get(prompt_name))))


# ============================================
# CONVENIENCE FUNCTIONS
# ============================================

def get_prompt(prompt_name: str, **kwargs: Any) -> str:
    """
    Get a prompt, formatted when variables are given.

    Example:
        from prompts import get_prompt

        prompt = get_prompt("explanation", event_summary="...", ...)
    """
    loader = PromptLoader()

    if kwargs:
        return loader.format(prompt_name, **kwargs)
    return loader.get(prompt_name)


def list_prompts() -> list[str]:
    return PromptLoader().list_prompts()
