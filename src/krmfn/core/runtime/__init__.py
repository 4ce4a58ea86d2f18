# src/krmfn/core/runtime/__init__.py
"""
Runtime de execução de funções.

Componentes:
    - mounts      → `StorageMount` (montagens sempre read-only)
    - descriptor  → `FunctionDescriptor` (o que executar e com qual política)
    - environment → construção pura do ambiente do processo filho
    - invoker     → `FunctionInvoker` (spawn, stdin/stdout, exit status)
    - results     → persistência do documento de results

Limites explícitos:
    - Não resolve escopo nem particiona Resources
    - Não aplica timeout nem retry
"""
