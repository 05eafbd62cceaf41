"""
Paragraph Assembly

Groups the flat top-level content of a document into paragraphs and then
subdivides paragraphs at runs of line breaks.

Key Components:
- assemble_paragraphs: Paragraph boundaries from block elements
- split_paragraphs_by_line_breaks: Default multiple-line-break splitter
"""

import logging
from typing import Callable, List, Optional, Sequence

from .types import BlockElement, Content, LINE_BREAK, Paragraph, is_line_break

logger = logging.getLogger(__name__)

DEFAULT_PARAGRAPH_BREAK_THRESHOLD = 2

ParagraphSplitter = Callable[[List[Paragraph]], List[Paragraph]]


def split_paragraphs_by_line_breaks(
    paragraphs: Sequence[Paragraph],
    threshold: int = DEFAULT_PARAGRAPH_BREAK_THRESHOLD
) -> List[Paragraph]:
    """
    Split paragraphs wherever ``threshold`` or more line breaks follow each other.

    A run that long is a paragraph delimiter and is dropped. Line breaks at
    the start or end of a paragraph are dropped too, and paragraphs left
    empty disappear. Shorter runs inside a paragraph are kept as they are.

    Args:
        paragraphs: Assembled paragraphs
        threshold: Minimum number of adjacent line breaks separating paragraphs

    Returns:
        New list of paragraphs

    Raises:
        ValueError: If threshold is lower than 1
    """
    if not isinstance(threshold, int) or threshold < 1:
        raise ValueError(f"threshold must be a positive integer, got {threshold!r}")

    result: List[Paragraph] = []
    for paragraph in paragraphs:
        current: Paragraph = []
        pending_breaks = 0
        for item in paragraph:
            if is_line_break(item):
                pending_breaks += 1
                continue
            if pending_breaks >= threshold:
                if current:
                    result.append(current)
                current = []
            elif current:
                current.extend([LINE_BREAK] * pending_breaks)
            pending_breaks = 0
            current.append(item)
        if current:
            result.append(current)

    if len(result) != len(paragraphs):
        logger.debug(f"Split {len(paragraphs)} paragraphs into {len(result)}")
    return result


def assemble_paragraphs(
    content: Content,
    split_paragraphs: Optional[ParagraphSplitter] = None
):
    """
    Turn the top-level content of a document into a list of paragraphs.

    Args:
        content: Result of parsing the children of the document root
        split_paragraphs: Splitter applied to the assembled paragraphs,
            ``split_paragraphs_by_line_breaks`` by default

    Returns:
        None when there is no content, the bare string when the whole
        document is plain text, otherwise the split list of paragraphs
    """
    if content is None:
        return None

    # Plain text documents are not forced into a list of paragraphs.
    if isinstance(content, str):
        return content

    items = content if isinstance(content, list) else [content]

    paragraphs: List[Paragraph] = []
    paragraph: Paragraph = []

    for item in items:
        if isinstance(item, BlockElement):
            if paragraph:
                paragraphs.append(paragraph)
                paragraph = []
            paragraphs.append([item.element])
        else:
            paragraph.append(item)

    if paragraph:
        paragraphs.append(paragraph)

    if split_paragraphs is None:
        split_paragraphs = split_paragraphs_by_line_breaks
    return split_paragraphs(paragraphs)
