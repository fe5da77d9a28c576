from .mapping import Mapping

__all__ = ["Mapping"]
