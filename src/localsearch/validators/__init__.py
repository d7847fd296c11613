from .comparator_validator import ComparatorValidator

__all__ = ["ComparatorValidator"]
