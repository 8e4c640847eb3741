"""
cdktf_provider_project package

Resolves the package identity of a prebuilt Terraform CDK provider.

Key responsibilities are split across modules:
- `spec_parser.py`: parse `owner/name[@version]` provider specs and options files
- `identity.py`: derive npm / Python / NuGet / Maven / Go identifiers from a provider name
- `version_anchor.py`: decide whether the major version must be pinned to 1 (git tag probe)
- `project.py`: merge everything into a single `ProjectConfig` record
- `cli.py`: CLI entrypoint (parse -> derive -> probe -> print)
"""

from __future__ import annotations

from cdktf_provider_project.identity import DEFAULT_ORGANIZATION, IdentitySet, OrganizationContext, derive_identities
from cdktf_provider_project.project import ProjectConfig, build_project_config
from cdktf_provider_project.spec_parser import InvalidSpecError, ParsedProvider, SpecError, parse_provider_spec
from cdktf_provider_project.version_anchor import resolve_major_version

__all__ = [
    "__version__",
    "DEFAULT_ORGANIZATION",
    "IdentitySet",
    "InvalidSpecError",
    "OrganizationContext",
    "ParsedProvider",
    "ProjectConfig",
    "SpecError",
    "build_project_config",
    "derive_identities",
    "parse_provider_spec",
    "resolve_major_version",
]

__version__ = "0.1.0"
