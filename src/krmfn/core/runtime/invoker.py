# src/krmfn/core/runtime/invoker.py
"""
Invoker de funções: executa o processo externo e troca o envelope.

Fluxo de `run`:
    1. monta o comando (container com postura endurecida, ou executável local)
    2. constrói o ambiente (snapshot injetado + variáveis de sinalização)
    3. envia o ResourceList no stdin e captura o stdout
    4. repassa o stderr do filho para o stderr do processo atual, sem parse
    5. decodifica o stdout **independente** do exit status

Decisões arquiteturais:
    - Execução síncrona: um processo por chamada, aguardado até o fim
    - stdin e stdout são drenados concorrentemente (`communicate`), sem
      deadlock quando a função intercala leitura e escrita
    - Exit não-zero não é exceção aqui; a política pertence ao chamador
    - Nenhum estado de Resources é retido entre chamadas

Limites explícitos:
    - Não aplica timeout nem retry
    - Não muta `os.environ`
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from typing import IO, Any, Dict, List, Mapping, Optional, Sequence, Union

from krmfn.core.config.hashing import payload_meta
from krmfn.core.config.settings import RuntimeSettings
from krmfn.core.exceptions import DecodeError, ProcessSpawnError
from krmfn.core.resource import Resource
from krmfn.core.wire import decode_resource_list, encode_resource_list

from .descriptor import RUNTIME_CONTAINER, FunctionDescriptor
from .environment import build_environment, declared_env_names


@dataclass(frozen=True)
class InvocationResult:
    """Saída bruta de uma invocação (antes de merge e proveniência)."""

    resources: List[Resource] = field(default_factory=list)
    results: Optional[Resource] = None
    exit_code: int = 0
    payload_meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class FunctionInvoker:
    """
    Executa uma função externa sobre um conjunto de Resources em escopo.

    Args:
        settings: parâmetros fixos de runtime (engine, user, rede padrão, sinais).
        environ: snapshot do ambiente a propagar; `None` captura `os.environ`
            uma única vez, na construção.
        command: comando explícito que substitui o comando derivado do descriptor.
        stderr: destino do stderr do filho; `None` herda o do processo atual.
    """

    def __init__(
        self,
        *,
        settings: Optional[RuntimeSettings] = None,
        environ: Optional[Mapping[str, str]] = None,
        command: Optional[Sequence[str]] = None,
        stderr: Union[None, int, IO[Any]] = None,
    ):
        self.settings: RuntimeSettings = settings or RuntimeSettings()
        self.environ: Dict[str, str] = dict(os.environ if environ is None else environ)
        self.command: Optional[List[str]] = list(command) if command else None
        self.stderr = stderr

    def environment(self) -> Dict[str, str]:
        return build_environment(self.environ, self.settings.signals)

    def build_command(self, descriptor: FunctionDescriptor, env: Mapping[str, str]) -> List[str]:
        if self.command:
            return list(self.command)

        if descriptor.runtime != RUNTIME_CONTAINER:
            return [descriptor.exec_path, *descriptor.exec_args]

        args = [
            self.settings.engine, "run",
            "--rm",
            "-i", "-a", "STDIN", "-a", "STDOUT", "-a", "STDERR",
            "--network", descriptor.network or self.settings.network,
            "--user", self.settings.user,
            # fs não é read-only: funções podem precisar de arquivos temporários
            "--security-opt=no-new-privileges",
        ]
        for mount in descriptor.storage_mounts:
            args.extend(["--mount", mount.render()])
        for name in declared_env_names(env):
            args.extend(["-e", name])
        args.append(descriptor.image)
        return args

    def run(self, descriptor: FunctionDescriptor, resources: Sequence[Resource]) -> InvocationResult:
        """
        Executa a função e decodifica sua saída.

        Raises:
            InvalidFunctionSpecError: Descriptor sem runtime executável.
            EncodeError / DecodeError: Envelope de entrada ou saída inválido.
            ProcessSpawnError: Executável inexistente ou inutilizável.
        """
        env = self.environment()
        cmd = self.build_command(descriptor, env)

        payload = encode_resource_list(
            descriptor.config,
            resources,
            keep_reader_annotations=self.settings.keep_reader_annotations,
        )

        try:
            proc = subprocess.run(
                cmd,
                input=payload.encode("utf-8"),
                stdout=subprocess.PIPE,
                stderr=self.stderr,
                env=env,
                check=False,
            )
        except OSError as e:
            raise ProcessSpawnError(
                message=f"não foi possível iniciar a função: {cmd[0]}",
                details={"command": cmd[0], "error": e.strerror or str(e)},
                hint="Verifique se o runtime/executável existe e tem permissão de execução",
            ) from e

        try:
            output = proc.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(
                message="saída da função não é UTF-8",
                details={"error": str(e), "exit_code": proc.returncode},
            ) from e

        decoded = decode_resource_list(output)

        return InvocationResult(
            resources=decoded.resources,
            results=decoded.results,
            exit_code=proc.returncode,
            payload_meta=payload_meta(payload),
        )
