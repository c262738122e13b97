"""Tests for the jvmlocate subcommands and their exit codes."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from click.testing import CliRunner

from jvmlocate.cli.main import cli

from tests.jvm.helpers import create_apple_bundle, create_jre


class TestCurrent:
    """``jvmlocate current``."""

    def test_json(self, runner: CliRunner, cli_env, jdk_dir: Path) -> None:
        result = runner.invoke(
            cli, ["current", "--format", "json"], env=cli_env(jdk_dir / "jre"),
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["home"] == str(jdk_dir.resolve())
        assert data["base"] == str((jdk_dir / "jre").resolve())
        assert data["vendor"] == "generic"
        assert data["user_supplied"] is False
        assert data["java_executable"]["source"] == "home"
        assert data["tools_jar"] == str(jdk_dir.resolve() / "lib" / "tools.jar")
        assert data["description"] == "1.6.0_20 (Oracle Corporation 16.3-b01)"

    def test_text(self, runner: CliRunner, cli_env, tmp_path: Path) -> None:
        home = create_apple_bundle(tmp_path)
        result = runner.invoke(cli, ["current"], env=cli_env(home, vendor="Apple Inc."))
        assert result.exit_code == 0
        assert "apple" in result.output
        assert "Home" in result.output

    def test_properties_file(self, runner: CliRunner, cli_env, jdk_dir: Path, tmp_path: Path) -> None:
        props = tmp_path / "jvm.yaml"
        props.write_text(f"java.home: {jdk_dir}\njava.vm.vendor: IBM Corporation\n")
        result = runner.invoke(
            cli, ["--properties", str(props), "current", "--format", "json"],
            env=cli_env(None),
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["vendor"] == "ibm"

    def test_missing_java_home(self, runner: CliRunner, cli_env) -> None:
        result = runner.invoke(cli, ["current"], env=cli_env(None))
        assert result.exit_code == 2
        assert "Error" in result.output
        assert "java.home" in result.output

    def test_verbose(self, runner: CliRunner, cli_env, jdk_dir: Path) -> None:
        package_logger = logging.getLogger("jvmlocate")
        handlers, level = package_logger.handlers[:], package_logger.level
        try:
            result = runner.invoke(cli, ["-v", "current"], env=cli_env(jdk_dir / "jre"))
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.handlers[:] = handlers
            package_logger.setLevel(level)
        assert result.exit_code == 0


class TestHome:
    """``jvmlocate home PATH``."""

    def test_valid(self, runner: CliRunner, cli_env, jdk_dir: Path) -> None:
        result = runner.invoke(
            cli, ["home", str(jdk_dir), "--format", "json"], env=cli_env(jdk_dir),
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["user_supplied"] is True
        assert data["home"] == str(jdk_dir)
        assert data["description"] == f"User-supplied java: {jdk_dir}"

    def test_not_a_directory(self, runner: CliRunner, cli_env, tmp_path: Path) -> None:
        missing = tmp_path / "missing"
        result = runner.invoke(cli, ["home", str(missing)], env=cli_env(tmp_path))
        assert result.exit_code == 2
        assert "must be a valid directory" in result.output
        assert str(missing) in result.output

    def test_blank_path(self, runner: CliRunner, cli_env, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["home", ""], env=cli_env(tmp_path))
        assert result.exit_code == 2
        assert "must be a valid directory" in result.output

    def test_no_java_executable(self, runner: CliRunner, cli_env, tmp_path: Path) -> None:
        result = runner.invoke(
            cli, ["home", str(tmp_path), "--format", "json"], env=cli_env(tmp_path),
        )
        assert result.exit_code == 2
        error = json.loads(result.output)["error"]
        assert "java executable" in error


class TestExec:
    """``jvmlocate exec TOOL``."""

    def test_from_current_home(self, runner: CliRunner, cli_env, jdk_dir: Path) -> None:
        result = runner.invoke(
            cli, ["exec", "javac", "--format", "json"], env=cli_env(jdk_dir / "jre"),
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["path"] == str(jdk_dir.resolve() / "bin" / "javac")
        assert data["source"] == "home"
        assert data["resolved"] is True

    def test_from_path(self, runner: CliRunner, cli_env, tmp_path: Path, path_dir: Path) -> None:
        jre = create_jre(tmp_path)
        result = runner.invoke(
            cli, ["exec", "javac", "--format", "json"],
            env=cli_env(jre, search_path=path_dir),
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["path"] == str(path_dir / "javac")
        assert data["source"] == "path"

    def test_unresolved(self, runner: CliRunner, cli_env, tmp_path: Path) -> None:
        jre = create_jre(tmp_path)
        result = runner.invoke(cli, ["exec", "javac", "--format", "json"], env=cli_env(jre))
        assert result.exit_code == 1
        assert '"unresolved"' in result.output

    def test_asserted_home_is_strict(
        self, runner: CliRunner, cli_env, tmp_path: Path, path_dir: Path,
    ) -> None:
        jre = create_jre(tmp_path)
        result = runner.invoke(
            cli, ["exec", "javac", "--home", str(jre)],
            env=cli_env(jre, search_path=path_dir),
        )
        assert result.exit_code == 2
        assert "javac" in result.output
        assert "Error" in result.output

    def test_asserted_home_text(self, runner: CliRunner, cli_env, jdk_dir: Path) -> None:
        result = runner.invoke(
            cli, ["exec", "javadoc", "--home", str(jdk_dir)], env=cli_env(jdk_dir),
        )
        assert result.exit_code == 0
        assert "javadoc" in result.output

    def test_invalid_home(self, runner: CliRunner, cli_env, tmp_path: Path) -> None:
        result = runner.invoke(
            cli, ["exec", "java", "--home", str(tmp_path / "nope")], env=cli_env(tmp_path),
        )
        assert result.exit_code == 2
        assert "must be a valid directory" in result.output


class TestEnv:
    """``jvmlocate env``."""

    def test_apple_filters(self, runner: CliRunner, cli_env, tmp_path: Path) -> None:
        home = create_apple_bundle(tmp_path)
        env = cli_env(home, vendor="Apple Inc.", APP_NAME_42="Gradle", JAVA_MAIN_CLASS_42="Main",
                      JVMLOCATE_MARKER="kept")
        result = runner.invoke(cli, ["env", "--format", "json"], env=env)
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert "APP_NAME_42" not in data
        assert "JAVA_MAIN_CLASS_42" not in data
        assert data["JVMLOCATE_MARKER"] == "kept"

    def test_generic_keeps_all(self, runner: CliRunner, cli_env, jdk_dir: Path) -> None:
        env = cli_env(jdk_dir, APP_NAME_42="Gradle")
        result = runner.invoke(cli, ["env", "--format", "json"], env=env)
        assert result.exit_code == 0
        assert json.loads(result.output)["APP_NAME_42"] == "Gradle"

    def test_text(self, runner: CliRunner, cli_env, jdk_dir: Path) -> None:
        result = runner.invoke(cli, ["env"], env=cli_env(jdk_dir, JVMLOCATE_MARKER="kept"))
        assert result.exit_code == 0
        assert "JVMLOCATE_MARKER" in result.output
