"""
Estratégias de aceitação: decidem se um vizinho substitui a solução corrente.
"""
from abc import ABC, abstractmethod
from typing import Optional

from localsearch.models.solution import SolutionComparator, NaturalComparator


class AcceptanceStrategy(ABC):
    """
    Classe base abstrata para critérios de aceitação.

    Variantes como simulated annealing ou busca tabu trocam apenas esta
    estratégia; o laço do solver permanece o mesmo.
    """

    @abstractmethod
    def accepts(self, neighbor, current, solver) -> bool:
        """
        Args:
            neighbor (Solution): Vizinho recém-criado.
            current (Solution): Solução corrente.
            solver (LocalSearchSolver): Solver que pede a decisão (acesso a rng, estagnação etc).

        Returns:
            bool: True se o vizinho deve se tornar a nova solução corrente.
        """
        pass


class StrictImprovementAcceptance(AcceptanceStrategy):
    """
    Hill climbing puro: aceita apenas vizinhos estritamente melhores.
    Empates são rejeitados.
    """

    def __init__(self, comparator: Optional[SolutionComparator] = None):
        self.comparator = comparator

    def accepts(self, neighbor, current, solver) -> bool:
        comparator = self.comparator or getattr(solver, "comparator", None) or NaturalComparator()
        return comparator.is_better(neighbor, current)
