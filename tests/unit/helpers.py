"""
Soluções e fábricas de teste usadas pelos testes unitários.
"""
from localsearch.models.solution import Solution
from localsearch.solvers.factory import SolutionFactory


class CostSolution(Solution):
    """Solução mínima identificada apenas pelo custo (menor é melhor)."""

    def __init__(self, value, label=None):
        self.value = value
        self.label = label

    def costs(self):
        return self.value

    def __repr__(self):
        return f"CostSolution({self.value}{', ' + self.label if self.label else ''})"


class ScriptedFactory(SolutionFactory):
    """Fábrica que devolve uma sequência pré-definida de vizinhos."""

    def __init__(self, initial_cost, neighbor_costs=()):
        self.initial_cost = initial_cost
        self.neighbor_costs = list(neighbor_costs)
        self.initial_calls = 0
        self.neighbor_calls = 0
        self.produced = []

    def create_initial(self, rng):
        self.initial_calls += 1
        return CostSolution(self.initial_cost, "initial")

    def create_neighbor(self, current, rng):
        cost = self.neighbor_costs[self.neighbor_calls]
        self.neighbor_calls += 1
        neighbor = CostSolution(cost)
        self.produced.append(neighbor)
        return neighbor


class RandomWalkFactory(SolutionFactory):
    """Fábrica que usa o gerador do solver para perturbar o custo corrente."""

    def create_initial(self, rng):
        return CostSolution(rng.randint(500, 1000))

    def create_neighbor(self, current, rng):
        return CostSolution(current.costs() + rng.randint(-10, 10))


class FailingFactory(SolutionFactory):
    """Fábrica cujos vizinhos não podem ser construídos."""

    def create_initial(self, rng):
        return CostSolution(100)

    def create_neighbor(self, current, rng):
        raise RuntimeError("no feasible neighbor")


class BrokenInitialFactory(ScriptedFactory):
    """Fábrica cuja solução inicial falha a partir da chamada ``fail_from``."""

    def __init__(self, initial_cost, neighbor_costs=(), fail_from=1):
        super().__init__(initial_cost, neighbor_costs)
        self.fail_from = fail_from

    def create_initial(self, rng):
        if self.initial_calls + 1 >= self.fail_from:
            self.initial_calls += 1
            raise RuntimeError("cannot build initial solution")
        return super().create_initial(rng)
