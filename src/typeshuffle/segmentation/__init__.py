from typeshuffle.segmentation.splitter import SplitResult, TextSplitter

__all__ = ["SplitResult", "TextSplitter"]
