"""
spec_parser.py

Responsibility: Turn raw provider specs and project options files into typed models.

A provider spec looks like `owner/name` or `owner/name@version`:
- Only the last path segment is kept as the provider name; the owner is discarded.
- The version (right of the first `@`) is passed through untouched.
- Names ending in `-go` are rejected; that suffix is reserved for the Go module repo.

Options files are YAML mappings holding the input record handed over by the scaffolding
layer. Only `terraformProvider` and the repository root are interpreted here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


class SpecError(ValueError):
    pass


class InvalidSpecError(SpecError):
    pass


GO_SUFFIX = "-go"


@dataclass(frozen=True)
class ParsedProvider:
    """Provider name and optional pinned version parsed from a provider spec."""

    terraform_provider: str
    provider_name: str
    provider_version: str | None = None


@dataclass(frozen=True)
class ProjectOptions:
    """Input record for a provider project; version fields are opaque pass-throughs."""

    terraform_provider: str
    cdktf_version: str
    constructs_version: str
    jsii_version: str | None = None
    outdir: Path = Path(".")


def parse_provider_spec(spec: str) -> ParsedProvider:
    """
    Parse `owner/name[@version]` into a `ParsedProvider`.

    Raises InvalidSpecError when the name segment is empty or ends with `-go`.
    """
    fq_name, sep, version = spec.partition("@")
    provider_name = fq_name.split("/")[-1]
    if not provider_name:
        raise InvalidSpecError(f"{spec} doesn't seem to be valid")
    if provider_name.endswith(GO_SUFFIX):
        raise InvalidSpecError(
            f"providerName may not end with '{GO_SUFFIX}' as this can conflict with repos for go packages: {spec}"
        )

    return ParsedProvider(
        terraform_provider=spec,
        provider_name=provider_name,
        provider_version=version if sep else None,
    )


def _pick(data: dict[str, Any], *keys: str) -> Any:
    for k in keys:
        if data.get(k) is not None:
            return data[k]
    return None


def _required_str(data: dict[str, Any], camel: str, snake: str) -> str:
    value = _pick(data, camel, snake)
    if value is None or not str(value).strip():
        raise SpecError(f"Options must define `{camel}`.")
    return str(value)


def parse_project_options(data: Any, *, base_dir: str | Path = ".") -> ProjectOptions:
    """
    Build `ProjectOptions` from an already-loaded mapping.

    Keys are accepted in camelCase (as written by the scaffolding layer) or snake_case.
    A relative `outdir` is resolved against `base_dir`.
    """
    if not isinstance(data, dict):
        raise SpecError("Options must be a mapping/object at the top level.")

    terraform_provider = _required_str(data, "terraformProvider", "terraform_provider")
    cdktf_version = _required_str(data, "cdktfVersion", "cdktf_version")
    constructs_version = _required_str(data, "constructsVersion", "constructs_version")

    jsii_version = _pick(data, "jsiiVersion", "jsii_version")
    if jsii_version is not None:
        jsii_version = str(jsii_version)

    outdir_raw = _pick(data, "outdir", "repositoryRoot", "repository_root")
    outdir = Path(base_dir) / str(outdir_raw) if outdir_raw is not None else Path(base_dir)

    return ProjectOptions(
        terraform_provider=terraform_provider,
        cdktf_version=cdktf_version,
        constructs_version=constructs_version,
        jsii_version=jsii_version,
        outdir=outdir,
    )


def load_project_options(path: str | Path) -> ProjectOptions:
    """
    Load a YAML options file into `ProjectOptions`.

    The repository root defaults to the directory holding the file.
    """
    p = Path(path)
    if not p.is_file():
        raise SpecError(f"Options file does not exist or is not a file: {p}")
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SpecError(f"Options file is not valid YAML: {p}") from e
    return parse_project_options(data or {}, base_dir=p.resolve().parent)
