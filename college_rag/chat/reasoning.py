"""Separation of model reasoning from the visible answer text."""

import re

from college_rag.models.chat import ThinkSplit

THINK_OPEN = "<think>"
THINK_CLOSE = "</think>"

# Non-greedy so only the first span is captured; DOTALL for multi-line reasoning.
THINK_PATTERN: re.Pattern[str] = re.compile(
    re.escape(THINK_OPEN) + r"(.*?)" + re.escape(THINK_CLOSE),
    re.IGNORECASE | re.DOTALL,
)


def extract_think_content(text: str) -> ThinkSplit:
    """Split an answer into visible text and its first reasoning span.

    When no span is present the text is returned untouched. Otherwise the
    whole span (markers included) is cut out and both parts are trimmed.
    Spans after the first one stay in the visible text.

    Args:
        text: Raw answer text.

    Returns:
        ThinkSplit with ``hidden_text`` set to None when there is no span.
    """
    match = THINK_PATTERN.search(text)
    if match is None:
        return ThinkSplit(visible_text=text, hidden_text=None)

    visible = text[: match.start()] + text[match.end() :]
    return ThinkSplit(visible_text=visible.strip(), hidden_text=match.group(1).strip())


def wrap_think_content(thinking: str, answer: str) -> str:
    """Prefix ``answer`` with a reasoning span, or return it as is when empty."""
    if not thinking.strip():
        return answer
    return f"{THINK_OPEN}{thinking}{THINK_CLOSE}{answer}"
