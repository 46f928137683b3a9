"""Chat answer post-processing."""

from college_rag.chat.reasoning import extract_think_content, wrap_think_content
from college_rag.chat.transcript import render_transcript

__all__ = ["extract_think_content", "render_transcript", "wrap_think_content"]
