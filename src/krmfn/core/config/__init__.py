# src/krmfn/core/config/__init__.py

"""
Camada de configuração do krmfn.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar, validar estruturalmente e identificar a configuração de runtime
usada na execução de funções.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Projeção tipada (`RuntimeSettings`) consumida pelo invoker
    - Geração de hash canônico para rastreabilidade

Limites explícitos:
    - Não executa funções
    - Não lê o ambiente do processo
"""

from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash, payload_meta
from .loader import DEFAULT_CONFIG, load_config
from .merge import deep_merge
from .settings import RuntimeSettings

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "UnsupportedConfigFormatError",
    "DEFAULT_CONFIG",
    "RuntimeSettings",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "payload_meta",
]
