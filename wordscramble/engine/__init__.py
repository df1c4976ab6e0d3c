from .evaluation import is_correct

__all__ = ["is_correct"]
