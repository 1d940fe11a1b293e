from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from dependency_policy import action
from dependency_policy.action import main


def _env(workspace: Path, **inputs: str) -> dict[str, str]:
    env = {"GITHUB_WORKSPACE": str(workspace)}
    env.update(inputs)
    return env


def _announced_options(stdout: str) -> dict[str, object]:
    prefix = "Checking dependencies with options: "
    assert stdout.startswith(prefix)
    payload, _, _ = stdout[len(prefix):].partition("\n}")
    return json.loads(payload + "\n}")


def test_passing_manifest(
    tmp_path: Path,
    write_manifest: Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    write_manifest(
        dependencies={"react": "^18.0.0"},
        peerDependencies={"@tscircuit/core": "*"},
    )
    assert main(_env(tmp_path)) == 0

    captured = capsys.readouterr()
    assert _announced_options(captured.out) == {
        "package_type": "internal_lib",
        "peer_deps_should_be_asterisk": True,
        "additional_internal_modules": [],
        "ignore_packages": [],
    }
    assert "✅ All dependency checks passed!" in captured.out


def test_violations_exit_one(
    tmp_path: Path,
    write_manifest: Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    write_manifest(dependencies={"circuit-utils": "2.0.0", "@tscircuit/core": "1.0.0"})
    assert main(_env(tmp_path, INPUT_PACKAGE_TYPE="bundled_lib")) == 1

    err = capsys.readouterr().err
    assert "❌ Dependency check failed:" in err
    assert (
        '  - Internal module "circuit-utils" found in dependencies. '
        "Bundled libs cannot have internal dependencies." in err
    )
    assert err.index('"circuit-utils"') < err.index('"@tscircuit/core"')


def test_inputs_are_applied(
    tmp_path: Path,
    write_manifest: Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    write_manifest(
        dependencies={"@tscircuit/core": "1.0.0", "jscad-fiber": "1.0.0"},
    )
    env = _env(
        tmp_path,
        INPUT_ADDITIONAL_INTERNAL_MODULES="jscad-fiber",
        INPUT_IGNORE_PACKAGES="@tscircuit/core",
    )
    assert main(env) == 1

    err = capsys.readouterr().err
    assert '"jscad-fiber"' in err
    assert '"@tscircuit/core"' not in err


def test_missing_manifest(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(_env(tmp_path)) == 1

    err = capsys.readouterr().err
    error_lines = [line for line in err.splitlines() if line.startswith("  - ")]
    assert len(error_lines) == 1
    assert error_lines[0].startswith("  - Error reading or parsing package.json: ")


def test_step_summary_is_written(
    tmp_path: Path,
    write_manifest: Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    write_manifest(dependencies={"@tscircuit/core": "1.0.0"})
    summary = tmp_path / "step_summary.md"
    assert main(_env(tmp_path, GITHUB_STEP_SUMMARY=str(summary))) == 1
    assert "`@tscircuit/core`" in summary.read_text(encoding="utf-8")


def test_unexpected_error_is_reported(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def _boom(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(action, "check_manifest_file", _boom)
    assert main(_env(tmp_path)) == 1
    assert "❌ An error occurred: boom" in capsys.readouterr().err


def test_unwritable_step_summary_keeps_verdict(
    tmp_path: Path,
    write_manifest: Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    write_manifest(dependencies={"react": "^18.0.0"})
    summary = tmp_path / "missing-dir" / "summary.md"
    assert main(_env(tmp_path, GITHUB_STEP_SUMMARY=str(summary))) == 0

    captured = capsys.readouterr()
    assert "✅ All dependency checks passed!" in captured.out
    assert "step_summary_write_failed" in captured.err
    assert "An error occurred" not in captured.err
