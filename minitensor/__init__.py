"""Small float tensors with reductions, broadcasting, gradient clipping and dataset helpers."""

__version__ = "0.1.0"
__all__ = ["errors", "tensor", "reduce", "broadcast", "clip", "dataset"]