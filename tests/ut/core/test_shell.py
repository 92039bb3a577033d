"""shell.py 单元测试"""

from __future__ import annotations

import os

import pytest

from rocket.core.exceptions import ExecutionError
from rocket.utils.shell import CommandResult, LocalExecutor, run_cmd


class TestLocalExecutor:
    def test_success(self, tmp_path) -> None:
        r = LocalExecutor().execute("echo hello", cwd=str(tmp_path))
        assert r.success
        assert "hello" in r.stdout

    def test_list_args(self, tmp_path) -> None:
        r = LocalExecutor().execute(["echo", "a b"], cwd=str(tmp_path))
        assert r.stdout.strip() == "a b"

    def test_missing_binary(self, tmp_path) -> None:
        with pytest.raises(ExecutionError, match="命令不存在"):
            LocalExecutor().execute("definitely-not-a-command-xyz", cwd=str(tmp_path))

    def test_timeout(self, tmp_path) -> None:
        with pytest.raises(ExecutionError, match="命令超时") as excinfo:
            LocalExecutor().execute("sleep 5", cwd=str(tmp_path), timeout=0.1)
        assert "sleep 5" in str(excinfo.value)
        assert excinfo.value.__cause__ is not None


class TestRunCmd:
    def test_success(self, tmp_path) -> None:
        r = run_cmd("echo hello", cwd=str(tmp_path), label="test")
        assert r.returncode == 0
        assert "hello" in r.stdout

    def test_failure_raises(self, tmp_path) -> None:
        with pytest.raises(ExecutionError, match="cmd失败"):
            run_cmd("false", cwd=str(tmp_path))

    def test_custom_label_in_error(self, tmp_path) -> None:
        with pytest.raises(ExecutionError, match="bundle install失败"):
            run_cmd("false", cwd=str(tmp_path), label="bundle install")

    def test_env_passed(self, tmp_path) -> None:
        env = {**os.environ, "MY_TEST_VAR": "42"}
        r = run_cmd("env", cwd=str(tmp_path), env=env, label="env_test")
        assert "MY_TEST_VAR=42" in r.stdout

    def test_injected_executor(self) -> None:
        class Stub:
            def __init__(self) -> None:
                self.seen = None

            def execute(self, cmd, *, cwd=".", env=None, timeout=None):
                self.seen = (cmd, cwd, timeout)
                return CommandResult(returncode=0, stdout="ok", stderr="")

        stub = Stub()
        r = run_cmd(["git", "init"], cwd="/w", executor=stub, timeout=9)
        assert r.stdout == "ok"
        assert stub.seen == (["git", "init"], "/w", 9)
