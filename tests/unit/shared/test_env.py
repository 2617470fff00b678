from __future__ import annotations

import os

import pytest

from consul_health.shared.env import load_secret_file_variables


def test_load_secret_file_variables_reads_content(tmp_path) -> None:
    secret_file = tmp_path / "token.txt"
    secret_file.write_text("s3cr3t\n", encoding="utf-8")
    environ = {"CONSUL_HTTP_TOKEN_FILE": str(secret_file)}

    load_secret_file_variables(environ)

    assert environ["CONSUL_HTTP_TOKEN"] == "s3cr3t"


def test_load_secret_file_variables_defaults_to_process_env(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    secret_file = tmp_path / "token.txt"
    secret_file.write_text("from-file", encoding="utf-8")
    monkeypatch.setenv("CONSUL_TOKEN_FILE", str(secret_file))
    monkeypatch.delenv("CONSUL_TOKEN", raising=False)

    load_secret_file_variables()

    assert os.environ["CONSUL_TOKEN"] == "from-file"


def test_missing_file_is_skipped() -> None:
    environ = {"CONSUL_HTTP_TOKEN_FILE": "/tmp/does-not-exist-consul-token"}

    load_secret_file_variables(environ)

    assert "CONSUL_HTTP_TOKEN" not in environ


def test_undecodable_file_is_skipped(tmp_path) -> None:
    binary_file = tmp_path / "binary.bin"
    binary_file.write_bytes(b"\xff\xfe\xfd")
    environ = {"CONSUL_HTTP_TOKEN_FILE": str(binary_file)}

    load_secret_file_variables(environ)

    assert "CONSUL_HTTP_TOKEN" not in environ


def test_existing_target_is_kept(tmp_path) -> None:
    secret_file = tmp_path / "token.txt"
    secret_file.write_text("ignored", encoding="utf-8")
    environ = {
        "CONSUL_HTTP_TOKEN": "present",
        "CONSUL_HTTP_TOKEN_FILE": str(secret_file),
    }

    load_secret_file_variables(environ)

    assert environ["CONSUL_HTTP_TOKEN"] == "present"


def test_empty_path_is_skipped() -> None:
    environ = {"CONSUL_HTTP_TOKEN_FILE": ""}

    load_secret_file_variables(environ)

    assert "CONSUL_HTTP_TOKEN" not in environ
