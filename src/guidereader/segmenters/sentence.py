"""Deterministic sentence segmenter for mixed Chinese/Latin guide text."""

from typing import List

# Chinese and Latin sentence enders plus ellipsis and dash
BOUNDARY_MARKERS = "。！？.!?…—"
BASIC_MARKERS = "。！？.!?"

ASCII_DIGITS = "0123456789"


def normalize_newlines(text: str) -> str:
    """Rewrite \\r\\n and lone \\r to \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def is_decimal_point(text: str, i: int) -> bool:
    """True when text[i] is a period with an ASCII digit on each side."""
    return (
        text[i] == "."
        and 0 < i < len(text) - 1
        and text[i - 1] in ASCII_DIGITS
        and text[i + 1] in ASCII_DIGITS
    )


class SentenceSegmenter:
    """
    Deterministic rule-based sentence segmenter.
    Splits on boundary markers and bare newlines, keeping each run of
    markers at the end of the sentence it closes. Periods inside numbers
    such as 3.14 are never boundaries.
    """

    def __init__(self, markers: str = BOUNDARY_MARKERS):
        """
        Initialize segmenter.

        Args:
            markers: Characters that end a sentence (newline always does)
        """
        self.markers = frozenset(markers)

    def is_marker(self, text: str, i: int) -> bool:
        """Whether text[i] is a boundary marker (decimal points excluded)."""
        return text[i] in self.markers and not is_decimal_point(text, i)

    def segment(self, text: str) -> List[str]:
        """
        Segment text into sentences.

        Args:
            text: Raw document text, any line endings

        Returns:
            List[str]: Non-empty sentences with whitespace collapsed
        """
        if not text:
            return []

        text = normalize_newlines(text)
        n = len(text)
        sentences: List[List[str]] = []
        current: List[str] = []
        i = 0

        while i < n:
            ch = text[i]
            if ch == "\n" or self.is_marker(text, i):
                j = i + 1
                if ch != "\n":
                    while j < n and self.is_marker(text, j):
                        j += 1
                while j < n and text[j].isspace():
                    j += 1
                separator = text[i:j]

                if current:
                    current.append(separator)
                    sentences.append(current)
                    current = []
                elif sentences:
                    sentences[-1].append(separator)
                # a separator before any content has nothing to attach to
                i = j
                continue

            if current or not ch.isspace():
                current.append(ch)
            i += 1

        if current:
            sentences.append(current)

        result = []
        for parts in sentences:
            sentence = " ".join("".join(parts).split())
            if sentence:
                result.append(sentence)
        return result


_default_segmenter = SentenceSegmenter()


def segment(text: str) -> List[str]:
    """Segment text with the default marker set."""
    return _default_segmenter.segment(text)
