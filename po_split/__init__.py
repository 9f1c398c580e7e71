"""po-split: purchase-order export splitter and label report tool."""

__version__ = "0.3.0"
