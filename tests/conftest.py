from __future__ import annotations

import inspect
import os

import pytest
import typer.testing


def _patch_clirunner() -> None:
    # Newer Click always separates stderr and dropped the `mix_stderr` flag.
    if "mix_stderr" in inspect.signature(typer.testing.CliRunner).parameters:
        return

    class PatchedCliRunner(typer.testing.CliRunner):
        def __init__(self, *args, **kwargs):  # noqa: ANN002, ANN003
            kwargs.pop("mix_stderr", None)
            super().__init__(*args, **kwargs)

    typer.testing.CliRunner = PatchedCliRunner


_patch_clirunner()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path) -> None:
    """Keep host SUBREFLOW_* variables and any local .env out of the tests."""
    for key in list(os.environ):
        if key.startswith("SUBREFLOW_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
