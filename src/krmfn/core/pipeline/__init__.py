# src/krmfn/core/pipeline/__init__.py
"""
# Pipeline Core — krmfn

Este pacote define o contexto compartilhado de uma run que invoca funções.

## Componentes

- **context**
  - `RunContext`: eventos estruturados, warnings por função e artefatos

## Limites Explícitos

- Não ordena nem compõe múltiplas funções (responsabilidade do chamador)
- Não executa funções
"""
