"""
Line Break Extraction

Splits text containing literal newlines into text segments and
line-break content nodes.

Usage:
    >>> extract_line_breaks("text \\n text")
    ['text ', '\\n', ' text']
    >>> extract_line_breaks("text text")
    'text text'
"""

from typing import List, Union

from .types import LINE_BREAK


def extract_line_breaks(text: str) -> Union[str, List[str]]:
    """
    Extract every newline of ``text`` into its own line-break node.

    Empty segments are never emitted, so consecutive newlines become
    adjacent line-break nodes. Newline positions are scanned in a loop
    rather than by recursion: a long run of newlines must not grow the stack.

    Args:
        text: Text of a text node

    Returns:
        ``text`` itself if it has no newline, otherwise a list alternating
        non-empty text segments and ``LINE_BREAK`` nodes
    """
    index = text.find(LINE_BREAK)
    if index < 0:
        return text

    result: List[str] = []
    start = 0
    while index >= 0:
        if index > start:
            result.append(text[start:index])
        result.append(LINE_BREAK)
        start = index + len(LINE_BREAK)
        index = text.find(LINE_BREAK, start)

    if start < len(text):
        result.append(text[start:])
    return result
