"""Markdown export of saved chats."""

from college_rag.chat.reasoning import extract_think_content
from college_rag.models.chat import Citation, SavedChat


def _format_citations(citations: list[Citation]) -> str:
    return "\n".join(
        f"- chunk {citation.chunk_id} (score {citation.score:.3f})" for citation in citations
    )


def render_transcript(chat: SavedChat, include_reasoning: bool = False) -> str:
    """Render a saved chat as a Markdown document.

    Messages are written in ``order_num`` order when it is set, otherwise in
    the order received. Reasoning spans are dropped from answers unless
    ``include_reasoning`` is set, in which case they are quoted above the
    answer.

    Args:
        chat: The saved chat to render.
        include_reasoning: Whether to keep the model reasoning.

    Returns:
        Markdown text ending with a newline.
    """
    messages = sorted(
        enumerate(chat.messages),
        key=lambda item: (item[1].order_num if item[1].order_num is not None else item[0]),
    )

    lines: list[str] = [f"# {chat.title}", ""]
    for _, message in messages:
        split = extract_think_content(message.answer)

        lines.extend(["### Question", "", message.question.strip(), ""])
        if include_reasoning and split.hidden_text:
            lines.extend(["> " + line for line in split.hidden_text.split("\n")])
            lines.append("")
        lines.extend(["### Answer", "", split.visible_text.strip(), ""])
        if message.citations:
            lines.extend(["Sources:", _format_citations(message.citations), ""])

    return "\n".join(lines).rstrip("\n") + "\n"
