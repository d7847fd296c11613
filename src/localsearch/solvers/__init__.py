"""
Pacote que contém os solvers de busca local e seus pontos de extensão.
"""
from localsearch.solvers.base_solver import BaseSolver, SolverState
from localsearch.solvers.factory import SolutionFactory
from localsearch.solvers.acceptance import AcceptanceStrategy, StrictImprovementAcceptance
from localsearch.solvers.local_search_solver import LocalSearchSolver

__all__ = [
    "BaseSolver", "SolverState", "SolutionFactory",
    "AcceptanceStrategy", "StrictImprovementAcceptance", "LocalSearchSolver",
]
