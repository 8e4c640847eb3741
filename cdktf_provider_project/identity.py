"""
identity.py

Responsibility: Derive the package identifiers of a provider for every publishing target.

All identifiers are pure functions of the provider name and an `OrganizationContext`;
nothing here touches the filesystem, git, or the network.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Reserved identifiers in at least one target language.
MAVEN_RESERVED_NAMES = frozenset({"null", "random"})

_WORD_RE = re.compile(r"[A-Z]?[a-z0-9]+|[A-Z0-9]+(?![a-z])")


@dataclass(frozen=True)
class OrganizationContext:
    """Organization-wide naming constants shared by every provider project."""

    namespace: str
    github_namespace: str
    author_name: str
    author_address: str
    maven_endpoint: str = "https://hashicorp.oss.sonatype.org"
    git_user_name: str = "CDK for Terraform Team"
    git_user_email: str = "github-team-tf-cdk@hashicorp.com"


DEFAULT_ORGANIZATION = OrganizationContext(
    namespace="cdktf",
    github_namespace="hashicorp",
    author_name="HashiCorp",
    author_address="https://hashicorp.com",
)


@dataclass(frozen=True)
class NpmIdentity:
    name: str


@dataclass(frozen=True)
class PythonIdentity:
    dist_name: str
    module: str


@dataclass(frozen=True)
class NugetIdentity:
    dotnet_namespace: str
    package_id: str


@dataclass(frozen=True)
class MavenIdentity:
    group_id: str
    artifact_id: str
    java_package: str
    endpoint: str


@dataclass(frozen=True)
class GoIdentity:
    module_name: str
    package_name: str
    git_user_name: str
    git_user_email: str


@dataclass(frozen=True)
class IdentitySet:
    """Identifiers of one provider across the generic registry, Python, NuGet, Maven and Go."""

    provider_name: str
    npm: NpmIdentity
    python: PythonIdentity
    nuget: NugetIdentity
    maven: MavenIdentity
    go: GoIdentity


def slugify(name: str) -> str:
    """Replace every hyphen with an underscore."""
    return name.replace("-", "_")


def pascal_case(value: str) -> str:
    """
    Convert an identifier to PascalCase.

    Words are runs of lowercase letters and digits, optionally led by one capital,
    or runs of capitals; anything else separates words. Each word is capitalized
    and the rest lowercased, with no separator inserted before a leading digit.
    Examples: `cdktf` -> `Cdktf`, `google-beta` -> `GoogleBeta`, `myProvider` -> `MyProvider`,
    `foo-2bar` -> `Foo2bar`.
    """
    words = _WORD_RE.findall(value)
    return "".join(w[:1].upper() + w[1:].lower() for w in words)


def maven_slug(provider_name: str) -> str:
    if provider_name in MAVEN_RESERVED_NAMES:
        return f"{provider_name}_provider"
    return slugify(provider_name)


def nuget_name(provider_name: str, org: OrganizationContext) -> str:
    return f"HashiCorp.{pascal_case(org.namespace)}.Providers.{pascal_case(provider_name)}"


def derive_identities(provider_name: str, org: OrganizationContext = DEFAULT_ORGANIZATION) -> IdentitySet:
    """
    Derive the full identifier set for `provider_name`.

    `provider_name` is expected to have passed `parse_provider_spec`; this function never fails.
    """
    slug = slugify(provider_name)
    nuget = nuget_name(provider_name, org)

    return IdentitySet(
        provider_name=provider_name,
        npm=NpmIdentity(name=f"@{org.namespace}/provider-{provider_name}"),
        python=PythonIdentity(
            dist_name=f"{org.namespace}-cdktf-provider-{slug}",
            module=f"{org.namespace}_cdktf_provider_{slug}",
        ),
        nuget=NugetIdentity(dotnet_namespace=nuget, package_id=nuget),
        maven=MavenIdentity(
            group_id=f"com.{org.github_namespace}",
            artifact_id=f"cdktf-provider-{provider_name}",
            java_package=f"com.{org.github_namespace}.cdktf.providers.{maven_slug(provider_name)}",
            endpoint=org.maven_endpoint,
        ),
        go=GoIdentity(
            module_name=f"github.com/hashicorp/cdktf-provider-{provider_name}-go",
            package_name=provider_name,
            git_user_name=org.git_user_name,
            git_user_email=org.git_user_email,
        ),
    )
