# src/krmfn/core/engine/__init__.py
"""
Engine do krmfn.

Este pacote contém o orquestrador de uma única invocação de função:
resolve escopo, particiona, invoca, aplica a política de exit,
atribui proveniência e devolve a coleção final.

Componentes principais:
    - filter → `FunctionFilter`, `FilterResult`, `InvocationOutcome`

Limites explícitos:
    - Não ordena nem compõe múltiplas funções
    - Não persiste Resources
"""

from .filter import FilterResult, FunctionFilter, InvocationOutcome

__all__ = ["FilterResult", "FunctionFilter", "InvocationOutcome"]
