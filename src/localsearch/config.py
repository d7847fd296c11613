"""
Configuração centralizada do framework de busca local.
"""
import os

# -- logging -------------------------------------------------------------
LOG_LEVEL = os.environ.get("LOCALSEARCH_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# -- aleatoriedade -------------------------------------------------------
SEED_BITS = 64  # sementes são inteiros com sinal de 64 bits
SEED_MIN = -(2 ** (SEED_BITS - 1))
SEED_MAX = 2 ** (SEED_BITS - 1) - 1
