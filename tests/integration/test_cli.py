"""Integration tests for CLI and filesystem outcomes."""

import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[2]
_FIXTURE_TEMPLATES = _REPO_ROOT / "tests" / "fixtures" / "templates"


def _run(cwd: Path, *args: str) -> subprocess.CompletedProcess:
    """Run the CLI as a module inside ``cwd``."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(_REPO_ROOT), env.get("PYTHONPATH")]))
    cmd = [sys.executable, "-m", "newfile.cli", *args]
    return subprocess.run(cmd, cwd=cwd, env=env, capture_output=True, text=True, check=False)


@pytest.fixture
def workspace(tmp_path) -> Path:
    shutil.copytree(_FIXTURE_TEMPLATES, tmp_path / "templates")
    return tmp_path


@pytest.mark.integration
def test_cli_generates_byte_identical_output(workspace) -> None:
    proc = _run(workspace, "-t", "py", "out.py")

    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == "Instantiating `py` template as `out.py`\n"
    assert (workspace / "out.py").read_bytes() == b'print("hi")\n'


@pytest.mark.integration
def test_cli_rerun_refuses_existing_output(workspace) -> None:
    assert _run(workspace, "-t", "py", "out.py").returncode == 0
    before = (workspace / "out.py").stat()

    proc = _run(workspace, "-t", "py", "out.py")

    assert proc.returncode == 1
    assert "Output file 'out.py' exists" in proc.stderr
    assert (workspace / "out.py").read_bytes() == b'print("hi")\n'
    assert (workspace / "out.py").stat().st_mtime_ns == before.st_mtime_ns


@pytest.mark.integration
def test_cli_invalid_template_name_creates_nothing(workspace) -> None:
    proc = _run(workspace, "-t", "py!", "out.py")

    assert proc.returncode == 1
    assert proc.stderr.startswith("newfile: error: what: invalid template name 'py!'")
    assert not (workspace / "out.py").exists()


@pytest.mark.integration
def test_cli_help_lists_usage(workspace) -> None:
    proc = _run(workspace, "--help")

    assert proc.returncode == 0
    assert "usage: newfile [options...] <path>" in proc.stdout
    assert proc.stderr == ""


@pytest.mark.integration
def test_cli_outside_top_level_directory_fails(tmp_path) -> None:
    proc = _run(tmp_path, "-t", "py", "out.py")

    assert proc.returncode == 1
    assert "containing templates/" in proc.stderr
    assert not (tmp_path / "out.py").exists()


@pytest.mark.integration
def test_cli_preserves_template_permissions(workspace) -> None:
    (workspace / "templates" / "template.sh").chmod(0o755)

    proc = _run(workspace, "-t", "sh", "run.sh")

    assert proc.returncode == 0, proc.stderr
    assert (workspace / "run.sh").stat().st_mode & 0o777 == 0o755


@pytest.mark.integration
def test_package_runs_as_module(workspace) -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = str(_REPO_ROOT)
    proc = subprocess.run(
        [sys.executable, "-m", "newfile", "--version"],
        cwd=workspace,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert proc.returncode == 0
    assert proc.stdout.strip() == "newfile 0.1.0"
