"""
Testes unitários para Solution e os comparadores.
"""
import pytest
from localsearch.models.solution import Ordering, NaturalComparator, CostComparator
from localsearch.validators.comparator_validator import ComparatorValidator

from helpers import CostSolution

pytestmark = [pytest.mark.unit]


@pytest.fixture
def sample_solutions():
    """Fixture que fornece soluções com custos distintos e um empate."""
    return [CostSolution(100), CostSolution(90), CostSolution(95), CostSolution(90, "tie")]


def test_is_better_than_is_irreflexive(sample_solutions):
    """A relação "melhor que" do stub deve ser irreflexiva."""
    for solution in sample_solutions:
        assert not solution.is_better_than(solution)


def test_is_better_than_minimizes_costs():
    assert CostSolution(90).is_better_than(CostSolution(100))
    assert not CostSolution(100).is_better_than(CostSolution(90))


def test_natural_comparator_compare():
    comparator = NaturalComparator()
    assert comparator.compare(CostSolution(80), CostSolution(90)) is Ordering.BETTER
    assert comparator.compare(CostSolution(95), CostSolution(90)) is Ordering.WORSE
    assert comparator.compare(CostSolution(90), CostSolution(90)) is Ordering.EQUAL


def test_cost_comparator_maximize():
    comparator = CostComparator(minimize=False)
    assert comparator.is_better(CostSolution(10), CostSolution(5))
    assert not comparator.is_better(CostSolution(5), CostSolution(10))
    assert comparator.compare(CostSolution(7), CostSolution(7)) is Ordering.EQUAL


def test_validator_accepts_natural_order(sample_solutions):
    validator = ComparatorValidator()
    assert validator.is_valid(sample_solutions)


def test_validator_detects_reflexive_relation(sample_solutions):
    """Um comparador com <= viola a irreflexividade exigida pelo contador de estagnação."""
    class NonStrictComparator(CostComparator):
        def is_better(self, a, b):
            return a.costs() <= b.costs()

    validator = ComparatorValidator(NonStrictComparator())
    assert not validator.is_irreflexive(sample_solutions)
    assert not validator.is_valid(sample_solutions)


def test_validator_detects_asymmetry_and_transitivity_violations():
    class RockPaperScissors(CostComparator):
        beats = {("rock", "scissors"), ("scissors", "paper"), ("paper", "rock")}

        def is_better(self, a, b):
            return (a.label, b.label) in self.beats

    rps = [CostSolution(0, "rock"), CostSolution(0, "paper"), CostSolution(0, "scissors")]
    validator = ComparatorValidator(RockPaperScissors())
    assert validator.is_irreflexive(rps)
    assert validator.is_asymmetric(rps)
    assert not validator.is_transitive(rps)

    class Always(CostComparator):
        def is_better(self, a, b):
            return a is not b

    assert not ComparatorValidator(Always()).is_asymmetric(rps)
