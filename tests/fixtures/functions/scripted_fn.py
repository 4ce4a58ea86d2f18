"""
Função de teste dirigida pela própria configuração.

Lê um ResourceList do stdin e escreve o ResourceList resultante no stdout.
Chaves de `functionConfig.data`:
    - add:        lista de Resources a acrescentar à saída
    - drop_all:   descarta todos os items de entrada
    - label:      acrescenta `metadata.labels.touched: <valor>` a cada item
    - results:    documento de results a anexar ao envelope
    - echo_env:   lista de nomes; emite um ConfigMap `env-echo` com os valores
    - echo_input: emite um ConfigMap `input-echo` com o stdin bruto
    - stderr:     texto escrito no stderr
    - exit_code:  exit status do processo
    - raw_output: texto escrito no stdout no lugar do envelope
"""

import os
import sys

import yaml


def main():
    raw = sys.stdin.read()
    envelope = yaml.safe_load(raw) or {}
    items = list(envelope.get("items") or [])
    config = (envelope.get("functionConfig") or {}).get("data") or {}

    if config.get("stderr"):
        sys.stderr.write(str(config["stderr"]) + "\n")

    if "raw_output" in config:
        sys.stdout.write(config["raw_output"])
        return int(config.get("exit_code", 0))

    if config.get("drop_all"):
        items = []

    if config.get("label"):
        for item in items:
            item.setdefault("metadata", {}).setdefault("labels", {})["touched"] = str(config["label"])

    items.extend(config.get("add") or [])

    if config.get("echo_env"):
        items.append({
            "apiVersion": "v1",
            "kind": "ConfigMap",
            "metadata": {"name": "env-echo"},
            "data": {name: os.environ.get(name, "<unset>") for name in config["echo_env"]},
        })

    if config.get("echo_input"):
        items.append({
            "apiVersion": "v1",
            "kind": "ConfigMap",
            "metadata": {"name": "input-echo"},
            "data": {"stdin": raw},
        })

    out = {"apiVersion": envelope.get("apiVersion"), "kind": "ResourceList", "items": items}
    if config.get("results"):
        out["results"] = config["results"]

    sys.stdout.write(yaml.safe_dump(out, sort_keys=False))
    return int(config.get("exit_code", 0))


if __name__ == "__main__":
    sys.exit(main())
