from .solution import Solution, Ordering, SolutionComparator, NaturalComparator, CostComparator

__all__ = ["Solution", "Ordering", "SolutionComparator", "NaturalComparator", "CostComparator"]
