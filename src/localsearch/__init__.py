"""
Framework mínimo de busca local iterativa (hill climbing).

Fornece o ciclo de vida do solver, o contador de estagnação e os pontos de
extensão (solução inicial, vizinho aleatório e comparação de soluções).
"""
from localsearch.exceptions import SolverError, SolverNotInitializedError, SolverConfigurationError
from localsearch.models.solution import Solution, Ordering, SolutionComparator, NaturalComparator, CostComparator
from localsearch.solvers import (
    BaseSolver, SolverState, LocalSearchSolver, SolutionFactory,
    AcceptanceStrategy, StrictImprovementAcceptance,
)
from localsearch.observers import SolverObserver, TrajectoryObserver
from localsearch.validators.comparator_validator import ComparatorValidator

__all__ = [
    "SolverError", "SolverNotInitializedError", "SolverConfigurationError",
    "Solution", "Ordering", "SolutionComparator", "NaturalComparator", "CostComparator",
    "BaseSolver", "SolverState", "LocalSearchSolver", "SolutionFactory",
    "AcceptanceStrategy", "StrictImprovementAcceptance",
    "SolverObserver", "TrajectoryObserver",
    "ComparatorValidator",
]
