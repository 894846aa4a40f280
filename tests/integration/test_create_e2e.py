"""End-to-end runs of the CLI with a stand-in package manager.

A tiny executable script plays the role of ``npm``: it records each
invocation and, for ``run build``, writes ``dist/lib.bundle.js`` the way the
real bundler would.  The real :class:`SubprocessRunner` spawns it, so the
whole pipeline (resolve, guard, emit, install, build, report) runs for real.
"""

from __future__ import annotations

import json
import os
import stat
import sys
import textwrap
from pathlib import Path

import pytest

from create_nodality.cli import main

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(sys.platform == "win32", reason="uses a shebang script as npm"),
]


def _write_fake_npm(directory: Path, fail_on: str | None = None) -> Path:
    """Create an executable ``npm`` stand-in that logs its arguments."""
    body = directory / "fake_npm.py"
    body.write_text(
        textwrap.dedent(
            f"""\
            import json, pathlib, sys
            args = sys.argv[1:]
            with open("npm-calls.log", "a", encoding="utf-8") as log:
                log.write(json.dumps(args) + "\\n")
            if args and args[0] == {fail_on!r}:
                sys.exit(7)
            if args == ["run", "build"]:
                dist = pathlib.Path("dist")
                dist.mkdir(exist_ok=True)
                (dist / "lib.bundle.js").write_text("export {{}};", encoding="utf-8")
            """
        ),
        encoding="utf-8",
    )
    script = directory / "fake-npm"
    script.write_text(
        f'#!/bin/sh\nexec "{sys.executable}" "{body}" "$@"\n',
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


def _calls(project: Path) -> list[list[str]]:
    lines = (project / "npm-calls.log").read_text(encoding="utf-8").splitlines()
    return [json.loads(line) for line in lines]


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    return work


class TestCreateEndToEnd:
    def test_full_run(self, tmp_path: Path, workspace: Path, monkeypatch, capsys):
        npm = _write_fake_npm(tmp_path)
        monkeypatch.setenv("CREATE_NODALITY_PACKAGE_MANAGER", str(npm))
        monkeypatch.chdir(workspace)

        assert main(["demo"]) == 0

        project = workspace / "demo"
        assert _calls(project) == [["install"], ["run", "build"]]
        assert (project / "dist" / "lib.bundle.js").is_file()
        for name in ("index.html", "src/app.js", "webpack.config.js", "package.json"):
            assert (project / name).is_file(), name

        manifest = json.loads((project / "package.json").read_text(encoding="utf-8"))
        assert set(manifest["scripts"]) == {"build", "watch", "start", "dev"}
        assert len(manifest["dependencies"]) == 1
        assert 'Project "demo" is ready!' in capsys.readouterr().out

    def test_install_failure_exits_nonzero(self, tmp_path: Path, workspace: Path, monkeypatch):
        npm = _write_fake_npm(tmp_path, fail_on="install")
        monkeypatch.setenv("CREATE_NODALITY_PACKAGE_MANAGER", str(npm))

        assert main(["demo"], cwd=workspace) == 1
        assert _calls(workspace / "demo") == [["install"]]
        assert not (workspace / "demo" / "dist").exists()

    def test_build_failure_exits_nonzero(self, tmp_path: Path, workspace: Path, monkeypatch):
        npm = _write_fake_npm(tmp_path, fail_on="run")
        monkeypatch.setenv("CREATE_NODALITY_PACKAGE_MANAGER", str(npm))

        assert main(["demo"], cwd=workspace) == 1
        assert _calls(workspace / "demo") == [["install"], ["run", "build"]]

    def test_missing_package_manager(self, tmp_path: Path, workspace: Path, monkeypatch, capsys):
        monkeypatch.setenv("CREATE_NODALITY_PACKAGE_MANAGER", str(tmp_path / "no-npm"))

        assert main(["demo"], cwd=workspace) == 1
        assert "code 127" in capsys.readouterr().err

    def test_twice_with_same_name(self, tmp_path: Path, workspace: Path, monkeypatch, capsys):
        npm = _write_fake_npm(tmp_path)
        monkeypatch.setenv("CREATE_NODALITY_PACKAGE_MANAGER", str(npm))

        assert main(["demo"], cwd=workspace) == 0
        calls_after_first = _calls(workspace / "demo")
        capsys.readouterr()

        assert main(["demo"], cwd=workspace) == 1
        err = capsys.readouterr().err
        assert "Folder demo already exists." in err
        assert _calls(workspace / "demo") == calls_after_first
        assert sorted(os.listdir(workspace)) == ["demo"]
