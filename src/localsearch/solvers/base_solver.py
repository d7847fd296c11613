"""
Módulo que contém a classe abstrata BaseSolver, responsável pelo ciclo de vida dos solvers.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List, Optional
import logging
import random

from localsearch.common.randomness import make_seed, make_rng, validate_seed
from localsearch.exceptions import SolverNotInitializedError

logger = logging.getLogger(__name__)


class SolverState(Enum):
    UNINITIALIZED = 'uninitialized'
    READY = 'ready'


class BaseSolver(ABC):
    """
    Classe base abstrata para solvers iterativos.

    Controla o protocolo de execução: initialize() é chamado uma vez e depois
    step() repetidamente, até que a condição de parada do chamador seja
    satisfeita. Cada instância possui sua própria semente e seu próprio
    gerador de números aleatórios.

    Atributos:
        seed (int): Semente de 64 bits usada para criar o gerador.
        rng (random.Random): Gerador de números aleatórios do solver.
        observers (list[SolverObserver]): Observadores notificados a cada transição.
        number_of_steps (int): Passos concluídos desde o último initialize().
        state (SolverState): Estado atual do ciclo de vida.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None,
                 observers: Optional[List] = None):
        """
        Inicializa o solver.

        Args:
            seed (int, opcional): Semente do gerador. Se omitida, usa o relógio do
                sistema no momento da construção. Útil para reproduzir resultados.
            rng (random.Random, opcional): Gerador já construído (por exemplo, um
                stub determinístico em testes). Se omitido, é criado a partir da semente.
            observers (list, opcional): Observadores de diagnóstico.

        Raises:
            ValueError: Se a semente não for um inteiro de 64 bits com sinal.
        """
        self.seed = make_seed() if seed is None else validate_seed(seed)
        self.rng = rng if rng is not None else make_rng(self.seed)
        self.observers = list(observers) if observers else []
        self.number_of_steps = 0
        self.state = SolverState.UNINITIALIZED

    @property
    def is_initialized(self) -> bool:
        return self.state is SolverState.READY

    def add_observer(self, observer):
        self.observers.append(observer)

    def initialize(self):
        """
        Prepara o solver para a execução de passos.

        Pode ser chamado novamente para reiniciar a busca (restart) a partir
        de uma nova solução inicial. Falhas do hook de construção propagam
        inalteradas.
        """
        self._do_initialize()
        self.number_of_steps = 0
        self.state = SolverState.READY
        solution = self.get_current_solution()
        for observer in self.observers:
            observer.on_initialized(self, solution)

    def step(self):
        """
        Executa um passo de otimização.

        Raises:
            SolverNotInitializedError: Se initialize() ainda não foi chamado.
        """
        if self.state is not SolverState.READY:
            raise SolverNotInitializedError("initialize() must be called before step()")
        neighbor, accepted = self._do_step()
        self.number_of_steps += 1
        for observer in self.observers:
            observer.on_step(self, neighbor, accepted)

    def run(self, stop_condition: Callable[["BaseSolver"], bool], max_steps: Optional[int] = None):
        """
        Executa o solver até que o chamador decida parar.

        Args:
            stop_condition (Callable[[BaseSolver], bool]): Consultada antes de cada
                passo; a execução termina quando retorna True.
            max_steps (int, opcional): Limite adicional de passos nesta chamada.

        Returns:
            Solution: A solução corrente ao final da execução.
        """
        if not self.is_initialized:
            self.initialize()
        logger.info(f"{self.name} iniciado (seed={self.seed}).")
        steps_in_run = 0
        while not stop_condition(self):
            if max_steps is not None and steps_in_run >= max_steps:
                break
            self.step()
            steps_in_run += 1
        logger.info(f"{self.name} finalizado após {steps_in_run} passos.")
        return self.get_current_solution()

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def get_current_solution(self):
        """
        Returns:
            Solution: A solução corrente (por referência; não deve ser alterada).
        """
        pass

    @abstractmethod
    def _do_initialize(self):
        pass

    @abstractmethod
    def _do_step(self):
        """
        Returns:
            tuple: (vizinho, aceito) do passo, repassados aos observadores.
        """
        pass
