"""
guide-reader - Sentence-by-sentence presentation of guide narration scripts.

The core is a deterministic segmenter for mixed Chinese/Latin text; the
reader, catalog and renderers around it are thin and replaceable.
"""

from guidereader.segmenters.sentence import SentenceSegmenter, segment

__version__ = "0.1.0"

__all__ = ["SentenceSegmenter", "segment", "__version__"]
