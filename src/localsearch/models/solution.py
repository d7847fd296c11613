"""
Módulo que contém a abstração Solution e os comparadores de soluções candidatas.
"""
from abc import ABC, abstractmethod
from enum import Enum


class Solution(ABC):
    """
    Classe base abstrata para uma solução candidata de um problema de otimização.

    Soluções são tratadas como valores imutáveis depois de criadas: o solver
    substitui a solução corrente por inteiro, nunca a altera.
    """

    @abstractmethod
    def costs(self):
        """
        Retorna o custo da solução.

        Returns:
            Um escalar totalmente ordenado (por convenção, menor é melhor).
        """
        pass

    def is_better_than(self, other: "Solution") -> bool:
        """
        Relação estrita "melhor que" usada como critério de aceitação.

        A implementação padrão minimiza custos. Deve ser irreflexiva:
        ``x.is_better_than(x)`` é sempre False.

        Args:
            other (Solution): Solução a ser comparada.

        Returns:
            bool: True se esta solução é estritamente melhor que ``other``.
        """
        return self.costs() < other.costs()


class Ordering(Enum):
    """Resultado da comparação de ``a`` contra ``b`` (do ponto de vista de ``a``)."""
    BETTER = 'better'
    EQUAL = 'equal'
    WORSE = 'worse'


class SolutionComparator(ABC):
    """
    Capacidade de ordenação estrita entre soluções.
    """

    @abstractmethod
    def is_better(self, a, b) -> bool:
        """
        Args:
            a: Solução candidata.
            b: Solução de referência.

        Returns:
            bool: True se ``a`` é estritamente melhor que ``b``.
        """
        pass

    def compare(self, a, b) -> Ordering:
        """
        Compara duas soluções nos dois sentidos.

        Empates (nenhuma é melhor que a outra) resultam em Ordering.EQUAL.
        """
        if self.is_better(a, b):
            return Ordering.BETTER
        if self.is_better(b, a):
            return Ordering.WORSE
        return Ordering.EQUAL


class NaturalComparator(SolutionComparator):
    """Delegação direta para ``Solution.is_better_than``."""

    def is_better(self, a, b) -> bool:
        return a.is_better_than(b)


class CostComparator(SolutionComparator):
    """
    Compara soluções diretamente pelos seus custos.

    Atributos:
        minimize (bool): Se True, custo menor é melhor; se False, custo maior é melhor.
    """

    def __init__(self, minimize: bool = True):
        self.minimize = minimize

    def is_better(self, a, b) -> bool:
        if self.minimize:
            return a.costs() < b.costs()
        return a.costs() > b.costs()
