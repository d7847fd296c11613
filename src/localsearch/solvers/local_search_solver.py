"""
Módulo que contém o LocalSearchSolver, o laço genérico de melhora ou estagnação.
"""
from typing import List, Optional
import logging
import random

from localsearch.exceptions import SolverConfigurationError
from localsearch.models.solution import SolutionComparator, NaturalComparator
from localsearch.solvers.acceptance import AcceptanceStrategy, StrictImprovementAcceptance
from localsearch.solvers.base_solver import BaseSolver
from localsearch.solvers.factory import SolutionFactory

logger = logging.getLogger(__name__)


class LocalSearchSolver(BaseSolver):
    """
    Solver de busca local: parte de uma solução inicial e move-se iterativamente
    para vizinhos dela.

    Se o vizinho é melhor que a solução corrente, ele se torna a nova solução
    corrente; caso contrário a solução corrente é mantida e o contador de
    estagnação é incrementado. Condições de parada possíveis (tempo fixo,
    número de passos sem melhora) ficam a cargo de quem chama run() ou step().

    A busca local pura pode ficar presa em ótimos locais. Reinícios (chamar
    initialize() novamente) ou uma AcceptanceStrategy diferente atenuam isso.

    As soluções são construídas por uma SolutionFactory injetada ou, em
    subclasses, sobrescrevendo create_initial_solution() e
    create_random_neighbor().

    Atributos:
        solution_factory (SolutionFactory): Construtora de soluções (opcional em subclasses).
        comparator (SolutionComparator): Ordenação estrita usada pela aceitação padrão.
        acceptance (AcceptanceStrategy): Critério que decide se o vizinho é aceito.
        current_solution (Solution): Solução corrente; None antes de initialize().
        situation_has_not_improved (int): Passos consecutivos sem melhora.
    """

    def __init__(self, solution_factory: Optional[SolutionFactory] = None,
                 seed: Optional[int] = None,
                 rng: Optional[random.Random] = None,
                 comparator: Optional[SolutionComparator] = None,
                 acceptance: Optional[AcceptanceStrategy] = None,
                 observers: Optional[List] = None):
        super().__init__(seed=seed, rng=rng, observers=observers)
        self.solution_factory = solution_factory
        self.comparator = comparator if comparator is not None else NaturalComparator()
        self.acceptance = acceptance if acceptance is not None else StrictImprovementAcceptance(self.comparator)
        self.current_solution = None
        self.situation_has_not_improved = 0

    @property
    def stagnation(self) -> int:
        return self.situation_has_not_improved

    def get_current_solution(self):
        return self.current_solution

    def _do_initialize(self):
        # se o hook falhar, o estado anterior (inclusive o contador) fica intacto
        initial = self.create_initial_solution()
        self.current_solution = initial
        self.situation_has_not_improved = 0
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Solução inicial com custo %s criada: %s", initial.costs(), initial)

    def _do_step(self):
        neighbor = self.create_random_neighbor()

        # a solução corrente só é substituída depois da decisão de aceitação
        accepted = self.acceptance.accepts(neighbor, self.current_solution, self)
        if accepted:
            self.current_solution = neighbor
            self.situation_has_not_improved = 0
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Vizinho melhor encontrado. Novo custo: %s", neighbor.costs())
        else:
            self.situation_has_not_improved += 1
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Vizinho não é melhor que a solução corrente. Custo permanece %s",
                             self.current_solution.costs())
        return neighbor, accepted

    def create_initial_solution(self):
        """
        Returns:
            Solution: A solução inicial de onde a busca local parte.
        """
        return self._require_factory().create_initial(self.rng)

    def create_random_neighbor(self):
        """
        Returns:
            Solution: Um vizinho aleatório da solução corrente.
        """
        return self._require_factory().create_neighbor(self.current_solution, self.rng)

    def _require_factory(self) -> SolutionFactory:
        if self.solution_factory is None:
            raise SolverConfigurationError(
                f"{self.name} has no SolutionFactory; pass one or override "
                "create_initial_solution() and create_random_neighbor()"
            )
        return self.solution_factory
