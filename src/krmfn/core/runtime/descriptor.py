# src/krmfn/core/runtime/descriptor.py
"""
Descriptor de função: o que executar e com qual política.

Um descriptor identifica o runtime (imagem de container ou executável
local), rede, montagens, flags de escopo/falha e a configuração da
função. A annotation de path da configuração define o escopo.

Decisões arquiteturais:
    - O descriptor é imutável: o resultado da execução (exit status,
      results) nunca é gravado nele, mas devolvido em um `InvocationOutcome`
    - Imagem tem precedência sobre executável quando ambos são declarados
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from krmfn.core.exceptions import InvalidFunctionSpecError
from krmfn.core.reconciler.classifier import get_function_spec
from krmfn.core.resource import PATH_ANNOTATION, Resource

from .mounts import StorageMount

RUNTIME_CONTAINER = "container"
RUNTIME_EXEC = "exec"


@dataclass(frozen=True)
class FunctionDescriptor:
    """
    Identidade e política de execução de uma função.

    Campos:
        - image: imagem de container (runtime `container`)
        - exec_path / exec_args: executável local (runtime `exec`)
        - network: modo de rede; vazio usa o padrão de runtime (`none`)
        - storage_mounts: montagens read-only
        - global_scope: a função recebe todos os Resources
        - defer_failure: exit não-zero é registrado, não abortivo
        - config: Resource de configuração da função (embutido no envelope)
        - results_file: destino opcional do documento de results
    """

    image: str = ""
    exec_path: str = ""
    exec_args: List[str] = field(default_factory=list)
    network: str = ""
    storage_mounts: List[StorageMount] = field(default_factory=list)
    global_scope: bool = False
    defer_failure: bool = False
    config: Optional[Resource] = None
    results_file: Optional[str] = None

    @property
    def runtime(self) -> str:
        if self.image:
            return RUNTIME_CONTAINER
        if self.exec_path:
            return RUNTIME_EXEC
        raise InvalidFunctionSpecError(
            message="descriptor sem imagem nem executável",
            details={"image": self.image, "exec_path": self.exec_path},
            hint="Declare container.image ou exec.path na função",
        )

    @property
    def function_path(self) -> Optional[str]:
        """Path annotation da configuração da função, quando legível."""
        if self.config is None:
            return None
        return self.config.get_meta().annotations.get(PATH_ANNOTATION) or None

    @property
    def identity(self) -> str:
        return self.image or self.exec_path or "<unknown>"

    def __str__(self) -> str:
        if self.defer_failure:
            return f"{self.identity} deferFailure: {self.defer_failure}"
        return self.identity

    @classmethod
    def from_resource(cls, resource: Resource, **overrides: Any) -> "FunctionDescriptor":
        """
        Constrói um descriptor a partir de um Resource que declara uma função.

        O próprio Resource vira a configuração da função. `overrides`
        ajusta campos de política (ex.: `defer_failure=True`).

        Raises:
            InvalidFunctionSpecError: Se o Resource não declara função executável.
        """
        spec = get_function_spec(resource)
        if spec is None:
            raise InvalidFunctionSpecError(
                message="Resource não declara uma função executável",
                details={"kind": resource.kind, "apiVersion": resource.api_version},
                hint="Adicione a annotation config.kubernetes.io/function",
            )

        fields: dict = {"config": resource, "exec_path": spec.exec_path}
        if spec.container is not None:
            fields.update(
                image=spec.container.image,
                network=spec.container.network,
                storage_mounts=list(spec.container.mounts),
            )
        fields.update(overrides)
        return cls(**fields)
