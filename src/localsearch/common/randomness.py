"""
Utilitários para a semente e o gerador de números aleatórios dos solvers.
"""
import operator
import random
import time

from localsearch.config import SEED_MIN, SEED_MAX, SEED_BITS


def make_seed() -> int:
    """
    Gera uma semente a partir do relógio do sistema (milissegundos desde a epoch).

    Returns:
        int: Semente padrão usada quando nenhuma é informada ao solver.
    """
    return int(time.time() * 1000)


def validate_seed(seed) -> int:
    """
    Valida uma semente informada pelo usuário.

    Aceita qualquer inteiro que implemente ``__index__`` (por exemplo ``np.int64``).

    Args:
        seed (int): Semente candidata.

    Returns:
        int: A semente convertida para ``int``, se válida.

    Raises:
        ValueError: Se a semente não for um inteiro ou estiver fora do intervalo de 64 bits com sinal.
    """
    # bool é subclasse de int, mas não é uma semente aceitável
    if isinstance(seed, bool):
        raise ValueError(f"Seed must be an integer, got {type(seed).__name__}")
    try:
        seed = operator.index(seed)
    except TypeError:
        raise ValueError(f"Seed must be an integer, got {type(seed).__name__}") from None
    if not SEED_MIN <= seed <= SEED_MAX:
        raise ValueError(f"Seed {seed} does not fit in a signed {SEED_BITS}-bit integer")
    return seed


def make_rng(seed: int) -> random.Random:
    """Cria o gerador de números aleatórios próprio de um solver."""
    return random.Random(seed)
