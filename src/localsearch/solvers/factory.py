from abc import ABC, abstractmethod
import random


class SolutionFactory(ABC):
    """
    Classe base abstrata para a construção de soluções específicas de um problema.

    É injetada no LocalSearchSolver, que chama create_initial() uma vez por
    initialize() e create_neighbor() uma vez por step().
    """

    @abstractmethod
    def create_initial(self, rng: random.Random):
        """
        Cria a solução inicial de onde a busca local parte.

        Args:
            rng (random.Random): Gerador do solver, para reprodutibilidade.

        Returns:
            Solution: Uma solução válida e completa, sem depender do estado do solver.
        """
        pass

    @abstractmethod
    def create_neighbor(self, current, rng: random.Random):
        """
        Cria um vizinho aleatório da solução corrente.

        Args:
            current (Solution): Solução corrente do solver (não deve ser alterada).
            rng (random.Random): Gerador do solver, para reprodutibilidade.

        Returns:
            Solution: Uma nova solução alcançável a partir de ``current`` por um movimento local.
        """
        pass
