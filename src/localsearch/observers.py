"""
Observadores de diagnóstico injetáveis nos solvers.

Os observadores não afetam o comportamento do solver: recebem notificações
depois de cada transição de estado.
"""
from typing import List

import numpy as np


class SolverObserver:
    """Observador sem efeito; subclasses sobrescrevem apenas o que precisam."""

    def on_initialized(self, solver, solution):
        pass

    def on_step(self, solver, neighbor, accepted: bool):
        pass


class TrajectoryObserver(SolverObserver):
    """
    Registra a trajetória de custos de uma execução.

    A cada initialize() a gravação recomeça, com o custo da solução inicial
    como primeiro ponto.
    """

    def __init__(self):
        self._costs: List = []
        self._neighbor_costs: List = []
        self._accepted: List[bool] = []

    def reset(self):
        self._costs.clear()
        self._neighbor_costs.clear()
        self._accepted.clear()

    def on_initialized(self, solver, solution):
        self.reset()
        self._costs.append(solution.costs())

    def on_step(self, solver, neighbor, accepted: bool):
        self._neighbor_costs.append(neighbor.costs())
        self._accepted.append(accepted)
        self._costs.append(solver.get_current_solution().costs())

    def costs(self) -> np.ndarray:
        """
        Returns:
            np.ndarray: Custo da solução corrente após initialize() e após cada passo.
        """
        return np.asarray(self._costs)

    def neighbor_costs(self) -> np.ndarray:
        return np.asarray(self._neighbor_costs)

    def accepted(self) -> np.ndarray:
        return np.asarray(self._accepted, dtype=bool)

    def acceptance_rate(self) -> float:
        """Fração de passos cujo vizinho foi aceito (0.0 se nenhum passo foi dado)."""
        if not self._accepted:
            return 0.0
        return float(np.mean(self._accepted))
