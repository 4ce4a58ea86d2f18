# src/krmfn/core/__init__.py
"""
Core do krmfn.

O core é projetado para ser:
    - determinístico (mesma entrada, mesma partição e mesma proveniência)
    - testável de forma isolada (ambiente e comando injetáveis)
    - livre de estado global compartilhado entre invocações

Princípios fundamentais:
    - Proveniência desconhecida nunca é atribuída a uma função
    - Annotations de origem sobrevivem a toda transformação
    - Falhas são tipadas e, exceto exit adiado, interrompem a invocação
"""
