"""
project.py

Responsibility: Assemble the resolved configuration record of a provider project.

The record is plain data for the scaffolding layer: the parsed provider, its identity set,
the major-version anchor, and the opaque version pass-throughs.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from cdktf_provider_project.identity import DEFAULT_ORGANIZATION, IdentitySet, OrganizationContext, derive_identities
from cdktf_provider_project.spec_parser import ParsedProvider, ProjectOptions, parse_provider_spec
from cdktf_provider_project.version_anchor import TagProbe, resolve_major_version

LICENSE = "MPL-2.0"
DEFAULT_RELEASE_BRANCH = "main"


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def identities_to_dict(identities: IdentitySet) -> dict[str, dict[str, str]]:
    """Per-ecosystem identifiers as plain mappings with camelCase keys (`javaPackage`, `distName`)."""
    return {
        ecosystem: {_camel(k): v for k, v in asdict(getattr(identities, ecosystem)).items()}
        for ecosystem in ("npm", "python", "nuget", "maven", "go")
    }


@dataclass(frozen=True)
class ProjectConfig:
    """Everything the scaffolding layer needs to know about one provider project."""

    provider: ParsedProvider
    identities: IdentitySet
    major_version: int | None
    description: str
    keywords: tuple[str, ...]
    repository: str
    author_name: str
    author_address: str
    cdktf_version: str
    constructs_version: str
    jsii_version: str | None = None
    license: str = LICENSE
    default_release_branch: str = DEFAULT_RELEASE_BRANCH

    @property
    def name(self) -> str:
        return self.identities.npm.name

    def to_dict(self) -> dict[str, Any]:
        # Deterministic key order; consumers may diff the serialized output.
        return {
            "name": self.name,
            "description": self.description,
            "keywords": list(self.keywords),
            "repository": self.repository,
            "authorName": self.author_name,
            "authorAddress": self.author_address,
            "license": self.license,
            "defaultReleaseBranch": self.default_release_branch,
            "majorVersion": self.major_version,
            "terraformProvider": self.provider.terraform_provider,
            "providerName": self.provider.provider_name,
            "providerVersion": self.provider.provider_version,
            "cdktfVersion": self.cdktf_version,
            "constructsVersion": self.constructs_version,
            "jsiiVersion": self.jsii_version,
            **identities_to_dict(self.identities),
        }


def build_project_config(
    options: ProjectOptions,
    *,
    org: OrganizationContext = DEFAULT_ORGANIZATION,
    probe: TagProbe | None = None,
) -> ProjectConfig:
    """
    Parse the provider spec, derive identities and resolve the major version.

    Raises InvalidSpecError before any git probe runs if the provider spec is invalid.
    """
    provider = parse_provider_spec(options.terraform_provider)
    identities = derive_identities(provider.provider_name, org)
    major_version = resolve_major_version(options.outdir, probe=probe)
    name = provider.provider_name

    return ProjectConfig(
        provider=provider,
        identities=identities,
        major_version=major_version,
        description=f"Prebuilt {name} Provider for Terraform CDK (cdktf)",
        keywords=("cdktf", "terraform", "cdk", "provider", name),
        repository=f"https://github.com/{org.github_namespace}/cdktf-provider-{name}.git",
        author_name=org.author_name,
        author_address=org.author_address,
        cdktf_version=options.cdktf_version,
        constructs_version=options.constructs_version,
        jsii_version=options.jsii_version,
    )
