# src/krmfn/core/config/loader.py
"""
Loader canônico da configuração de runtime do krmfn.

A configuração efetiva é resolvida a partir de:
    - defaults embutidos (`DEFAULT_CONFIG`)
    - um arquivo de defaults do projeto (opcional)
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos de configuração em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Resolver a configuração final via deep-merge determinístico

Decisões arquiteturais:
    - O arquivo de defaults, quando declarado, deve existir
    - O arquivo local é opcional mesmo quando declarado
    - Overrides locais têm precedência sobre defaults

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - `DEFAULT_CONFIG` nunca é mutado

Limites explícitos:
    - Não lê variáveis de ambiente (o snapshot de ambiente é injetado no invoker)
    - Não executa funções
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


DEFAULT_CONFIG: Dict[str, Any] = {
    "runtime": {
        "engine": "docker",
        "user": "nobody",
        "network": "none",
        "keep_reader_annotations": True,
        "signals": {
            "LOG_TO_STDERR": "true",
            "STRUCTURED_RESULTS": "true",
        },
    },
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva de runtime.

    Política de resolução:
        - `DEFAULT_CONFIG` é sempre a base
        - `defaults_path`, quando informado, é obrigatório e aplicado por cima
        - `local_path`, quando existir, tem prioridade sobre tudo

    Args:
        defaults_path (Optional[str]): Caminho para o arquivo de defaults do projeto.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        ConfigFileNotFoundError: Se o arquivo de defaults declarado não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    effective = deep_merge(DEFAULT_CONFIG, {})

    if defaults_path is not None:
        effective = deep_merge(effective, _load_file(Path(defaults_path)))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return effective
