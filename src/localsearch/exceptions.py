"""
Módulo que contém as exceções do framework de busca local.
"""


class SolverError(Exception):
    """
    Classe base para erros levantados pelo próprio framework.

    Falhas dentro dos hooks de construção de soluções não são convertidas
    para este tipo: elas propagam inalteradas.
    """


class SolverNotInitializedError(SolverError):
    """Levantada quando step() é chamado antes de initialize()."""


class SolverConfigurationError(SolverError):
    """Levantada quando o solver não tem como construir soluções (sem factory e sem hooks)."""
