from pathlib import Path

import pytest

from cdktf_provider_project.identity import OrganizationContext
from cdktf_provider_project.project import build_project_config
from cdktf_provider_project.spec_parser import InvalidSpecError, ProjectOptions


class FakeProbe:
    def __init__(self, has_metadata: bool, tags=None) -> None:
        self.has_metadata = has_metadata
        self.tags = tags
        self.probed = False

    def has_version_control_metadata(self, root: Path) -> bool:
        self.probed = True
        return self.has_metadata

    def list_tags(self, root: Path, pattern: str):
        return self.tags


def _options(spec: str, outdir: Path = Path(".")) -> ProjectOptions:
    return ProjectOptions(
        terraform_provider=spec,
        cdktf_version="^0.13.0",
        constructs_version="^10.0.0",
        outdir=outdir,
    )


def test_aws_in_fresh_directory(tmp_path: Path) -> None:
    config = build_project_config(_options("hashicorp/aws", tmp_path))

    assert config.major_version == 1
    assert config.provider.provider_name == "aws"
    assert config.provider.provider_version is None
    assert config.name == "@cdktf/provider-aws"
    assert config.identities.python.dist_name == "cdktf-cdktf-provider-aws"
    assert config.identities.python.module == "cdktf_cdktf_provider_aws"
    assert config.identities.nuget.package_id == "HashiCorp.Cdktf.Providers.Aws"
    assert config.identities.maven.java_package == "com.hashicorp.cdktf.providers.aws"
    assert config.identities.go.module_name == "github.com/hashicorp/cdktf-provider-aws-go"
    assert config.description == "Prebuilt aws Provider for Terraform CDK (cdktf)"
    assert config.keywords == ("cdktf", "terraform", "cdk", "provider", "aws")
    assert config.repository == "https://github.com/hashicorp/cdktf-provider-aws.git"
    assert config.license == "MPL-2.0"


def test_pinned_null_provider() -> None:
    config = build_project_config(_options("hashicorp/null@1.2.3"), probe=FakeProbe(True, ["v1.0.0"]))
    assert config.provider.provider_version == "1.2.3"
    assert config.identities.maven.java_package.endswith("null_provider")
    assert config.major_version is None


def test_invalid_spec_aborts_before_probe() -> None:
    probe = FakeProbe(True, [])
    with pytest.raises(InvalidSpecError):
        build_project_config(_options("org/foo-go"), probe=probe)
    assert probe.probed is False


def test_organization_is_threaded_through() -> None:
    org = OrganizationContext(
        namespace="acme",
        github_namespace="acme-inc",
        author_name="Acme",
        author_address="https://acme.example",
    )
    config = build_project_config(_options("acme/widgets"), org=org, probe=FakeProbe(False))
    assert config.name == "@acme/provider-widgets"
    assert config.repository == "https://github.com/acme-inc/cdktf-provider-widgets.git"
    assert config.author_name == "Acme"
    assert config.author_address == "https://acme.example"


def test_to_dict_is_plain_data() -> None:
    options = ProjectOptions(
        terraform_provider="hashicorp/google-beta@~> 4.0",
        cdktf_version="^0.13.0",
        constructs_version="^10.0.0",
        jsii_version="~5.0.0",
    )
    data = build_project_config(options, probe=FakeProbe(False)).to_dict()

    assert list(data)[:3] == ["name", "description", "keywords"]
    assert data["majorVersion"] == 1
    assert data["providerVersion"] == "~> 4.0"
    assert data["jsiiVersion"] == "~5.0.0"
    assert data["python"] == {
        "distName": "cdktf-cdktf-provider-google_beta",
        "module": "cdktf_cdktf_provider_google_beta",
    }
    assert data["nuget"]["packageId"] == "HashiCorp.Cdktf.Providers.GoogleBeta"
    assert data["go"]["packageName"] == "google-beta"


def test_to_dict_uses_camel_case_keys_throughout() -> None:
    data = build_project_config(_options("hashicorp/aws"), probe=FakeProbe(False)).to_dict()

    nested = [k for ecosystem in ("npm", "python", "nuget", "maven", "go") for k in data[ecosystem]]
    assert all("_" not in k for k in [*data, *nested])
    assert data["maven"] == {
        "groupId": "com.hashicorp",
        "artifactId": "cdktf-provider-aws",
        "javaPackage": "com.hashicorp.cdktf.providers.aws",
        "endpoint": "https://hashicorp.oss.sonatype.org",
    }
    assert data["nuget"] == {
        "dotnetNamespace": "HashiCorp.Cdktf.Providers.Aws",
        "packageId": "HashiCorp.Cdktf.Providers.Aws",
    }
    assert set(data["go"]) == {"moduleName", "packageName", "gitUserName", "gitUserEmail"}
