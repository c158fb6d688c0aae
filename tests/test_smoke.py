from __future__ import annotations

import importlib

import pytest


@pytest.mark.unit
def test_import_package() -> None:
    importlib.import_module("rotina")


@pytest.mark.unit
def test_import_cli_main() -> None:
    importlib.import_module("rotina.cli.main")


@pytest.mark.unit
def test_utils_reexports_public_helpers() -> None:
    utils = importlib.import_module("rotina.utils")
    for name in utils.__all__:
        assert hasattr(utils, name), name
