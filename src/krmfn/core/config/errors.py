# src/krmfn/core/config/errors.py
"""
Exceções canônicas da camada de configuração do krmfn.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, validação estrutural e resolução da configuração de runtime
(engine de containers, usuário, rede padrão, variáveis de sinalização).

As exceções aqui definidas representam **violações estruturais
explícitas** da configuração, e não falhas de execução de funções.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha de processo ou de envelope

Limites explícitos:
    - Não executa funções
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do krmfn.

    Todas as exceções levantadas durante carregamento, validação estrutural
    e resolução de configuração devem herdar desta classe.
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de configuração declarado
    explicitamente não existe no caminho especificado.

    Decisões arquiteturais:
        - Um caminho declarado é uma intenção explícita do operador
        - A ausência do arquivo não é silenciada com defaults embutidos
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    (ou de uma seção obrigatoriamente mapeada, como `runtime`)
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"runtime": {"network": "none"}}
        - override: {"runtime": "host"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
