"""
Tests for command models, descriptor loading and name sanitizing.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from payara_admin.commands import CommandDeploy, load_deploy_command
from payara_admin.core.exceptions import ConfigurationError
from payara_admin.utils.names import sanitize_name


def test_dir_deploy_derived_from_path(war_file: Path, exploded_dir: Path):
    assert CommandDeploy(path=war_file).dir_deploy is False
    assert CommandDeploy(path=exploded_dir).dir_deploy is True


def test_dir_deploy_not_settable(war_file: Path):
    assert CommandDeploy(path=war_file, dir_deploy=True).dir_deploy is False


def test_force_fixed(war_file: Path):
    assert CommandDeploy(path=war_file, force=False).force is True


def test_command_is_immutable(war_file: Path):
    command = CommandDeploy(path=war_file)

    with pytest.raises(ValidationError):
        command.name = "other"


def test_empty_name_is_absent(war_file: Path):
    assert CommandDeploy(path=war_file, name="").name is None


def test_camel_case_aliases(war_file: Path):
    command = CommandDeploy(path=war_file, contextRoot="/x", hotDeploy=True)

    assert command.context_root == "/x"
    assert command.hot_deploy is True


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, None),
        ("app", "app"),
        ("app-1.0/v;2#x", "app-1.0/v;2#x"),
        ("_hidden", "_hidden"),
        ("my app", "_my_app"),
        ("-app", "_-app"),
        ("a:b", "_a_b"),
    ],
)
def test_sanitize_name(raw, expected):
    assert sanitize_name(raw) == expected


def test_sanitize_name_idempotent():
    once = sanitize_name("bad name!")

    assert sanitize_name(once) == once


def test_load_descriptor(tmp_path: Path, war_file: Path):
    descriptor = tmp_path / "deploy.yaml"
    descriptor.write_text(
        "path: build/app.war\n"
        "name: shop\n"
        "target: server\n"
        "contextRoot: /shop\n"
        "hotDeploy: true\n"
        "properties:\n"
        "  keepSessions: true\n"
        "  b: 2\n"
        "libraries:\n"
        "  lib: x.jar\n"
    )

    command = load_deploy_command(descriptor)

    assert command.path == war_file
    assert command.name == "shop"
    assert command.target == "server"
    assert command.context_root == "/shop"
    assert command.hot_deploy is True
    assert list(command.properties.items()) == [("keepSessions", "true"), ("b", "2")]
    assert command.libraries == {"lib": "x.jar"}


def test_load_descriptor_without_path(tmp_path: Path):
    descriptor = tmp_path / "deploy.yaml"
    descriptor.write_text("name: shop\n")

    with pytest.raises(ConfigurationError):
        load_deploy_command(descriptor)


def test_load_descriptor_not_mapping(tmp_path: Path):
    descriptor = tmp_path / "deploy.yaml"
    descriptor.write_text("- a\n- b\n")

    with pytest.raises(ConfigurationError):
        load_deploy_command(descriptor)


def test_load_descriptor_bad_properties(tmp_path: Path):
    descriptor = tmp_path / "deploy.yaml"
    descriptor.write_text("path: app.war\nproperties: [a, b]\n")

    with pytest.raises(ConfigurationError):
        load_deploy_command(descriptor)


def test_load_missing_descriptor(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        load_deploy_command(tmp_path / "nope.yaml")
