"""Blocking prompts for turtle programs.

The asking function is injectable so scripts can be driven from tests or a
GUI; by default it is rich's console prompt.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.prompt import Prompt

logger = logging.getLogger(__name__)

AskFunction = Callable[[str], str]


def _rich_ask(text: str) -> str:
    return Prompt.ask(text)


# Global prompt function - replaced via set_prompt_function
_ask: AskFunction = _rich_ask


def set_prompt_function(ask: AskFunction | None) -> None:
    """Set the function used to ask questions, or None to restore the default."""
    global _ask
    _ask = ask or _rich_ask


def get_prompt_function() -> AskFunction:
    return _ask


def input_string(text: str) -> str:
    """Ask for free text."""
    return str(_ask(text))


def input_int(text: str) -> int:
    """Ask for a base-10 integer.

    Raises:
        ValueError: if the answer is not an integer
    """
    answer = input_string(text).strip()
    try:
        return int(answer, 10)
    except ValueError:
        logger.warning(f"Expected an integer for {text!r}, got {answer!r}")
        raise


def input_float(text: str) -> float:
    """Ask for a number.

    Raises:
        ValueError: if the answer is not a number
    """
    answer = input_string(text).strip()
    try:
        return float(answer)
    except ValueError:
        logger.warning(f"Expected a number for {text!r}, got {answer!r}")
        raise
