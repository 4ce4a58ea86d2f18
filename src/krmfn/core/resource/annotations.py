# src/krmfn/core/resource/annotations.py
"""
Chaves canônicas de annotations usadas pelo krmfn.

Reader annotations (path/index) registram a proveniência de um Resource:
o arquivo de origem e a posição do documento dentro dele. Elas atravessam
todo o fluxo de execução para permitir write-back posterior.
"""

# Proveniência (reader annotations)
PATH_ANNOTATION = "config.kubernetes.io/path"
INDEX_ANNOTATION = "config.kubernetes.io/index"

READER_ANNOTATIONS = (PATH_ANNOTATION, INDEX_ANNOTATION)

# Declaração de funções em Resources
FUNCTION_ANNOTATION = "config.kubernetes.io/function"
FUNCTION_ANNOTATION_SHORT = "config.k8s.io/function"
FUNCTION_ANNOTATION_KEYS = (FUNCTION_ANNOTATION, FUNCTION_ANNOTATION_SHORT)

# Forma legada: apenas a imagem do container
LEGACY_CONTAINER_ANNOTATION = "config.kubernetes.io/container"
