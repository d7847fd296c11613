"""
Módulo que contém a classe ComparatorValidator para verificar o contrato de ordenação estrita.
"""
import itertools
import logging
from typing import Optional, Sequence

from localsearch.models.solution import SolutionComparator, NaturalComparator

logger = logging.getLogger(__name__)


class ComparatorValidator:
    """
    Classe responsável por validar que um comparador define uma ordem estrita
    sobre uma amostra de soluções.

    O contador de estagnação só se comporta corretamente se a relação
    "melhor que" for irreflexiva.
    """
    def __init__(self, comparator: Optional[SolutionComparator] = None):
        """
        Args:
            comparator (SolutionComparator, opcional): Comparador a validar.
                Padrão: NaturalComparator (usa Solution.is_better_than).
        """
        self.comparator = comparator if comparator is not None else NaturalComparator()

    def is_irreflexive(self, solutions: Sequence) -> bool:
        for x in solutions:
            if self.comparator.is_better(x, x):
                logger.warning(f"Relação não é irreflexiva: {x} é melhor que si mesma.")
                return False
        return True

    def is_asymmetric(self, solutions: Sequence) -> bool:
        for a, b in itertools.combinations(solutions, 2):
            if self.comparator.is_better(a, b) and self.comparator.is_better(b, a):
                logger.warning(f"Relação não é assimétrica: {a} e {b} são melhores uma que a outra.")
                return False
        return True

    def is_transitive(self, solutions: Sequence) -> bool:
        for a, b, c in itertools.permutations(solutions, 3):
            if (self.comparator.is_better(a, b) and self.comparator.is_better(b, c)
                    and not self.comparator.is_better(a, c)):
                logger.warning(f"Relação não é transitiva: {a} > {b} > {c}, mas não {a} > {c}.")
                return False
        return True

    def is_valid(self, solutions: Sequence) -> bool:
        """
        Valida o comparador sobre a amostra informada.

        Verifica as seguintes condições:
        1. Irreflexividade: nenhuma solução é melhor que si mesma.
        2. Assimetria: nunca a > b e b > a ao mesmo tempo.
        3. Transitividade: a > b e b > c implicam a > c.

        Args:
            solutions (Sequence[Solution]): Amostra de soluções.

        Returns:
            bool: True se todas as condições valem, False caso contrário (com log do contraexemplo).
        """
        solutions = list(solutions)
        return (self.is_irreflexive(solutions)
                and self.is_asymmetric(solutions)
                and self.is_transitive(solutions))
