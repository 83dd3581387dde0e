from .runner import DecommentRunner

__all__ = ["DecommentRunner"]
