# src/krmfn/__init__.py
"""
krmfn — núcleo de execução de funções de transformação de configuração.

Este pacote raiz define o namespace público do krmfn, que executa
programas externos ("funções") sobre coleções de documentos de
configuração ("Resources"), restringindo cada função ao subconjunto de
Resources que ela está autorizada a ver e mesclando sua saída de volta.

Arquitetura em alto nível:
    - core.scope      → escopo da função e partição de Resources
    - core.wire       → envelope ResourceList (encode/decode)
    - core.runtime    → descriptor, ambiente, invoker e results
    - core.provenance → path/index padrão para Resources gerados
    - core.reconciler → classificação de Resources que declaram funções
    - core.engine     → `FunctionFilter`, o fluxo completo de uma invocação

Limites explícitos:
    - Não lê nem escreve Resources no filesystem
    - Não compõe múltiplas funções em um pipeline
"""

from .core.engine import FilterResult, FunctionFilter, InvocationOutcome
from .core.resource import Resource
from .core.runtime.descriptor import FunctionDescriptor
from .core.runtime.invoker import FunctionInvoker
from .core.runtime.mounts import StorageMount

__all__ = [
    "FilterResult",
    "FunctionDescriptor",
    "FunctionFilter",
    "FunctionInvoker",
    "InvocationOutcome",
    "Resource",
    "StorageMount",
]
