"""Shared test fixtures for molcart."""

import sqlite3

import pytest

from molcart.io import register_functions
from molcart.structure import codec


@pytest.fixture
def aspirin_smiles() -> str:
    return "CC(=O)Oc1ccccc1C(=O)O"


@pytest.fixture
def ethanol_smiles() -> str:
    return "CCO"


@pytest.fixture
def benzene_smiles() -> str:
    return "c1ccccc1"


@pytest.fixture
def phenol_smiles() -> str:
    return "Oc1ccccc1"


@pytest.fixture
def ethanol_blob(ethanol_smiles) -> bytes:
    return codec.text_to_blob(ethanol_smiles)


@pytest.fixture
def aspirin_blob(aspirin_smiles) -> bytes:
    return codec.text_to_blob(aspirin_smiles)


@pytest.fixture
def handle_log(monkeypatch):
    """Record every structure handle decoded through ``codec.decode``."""
    handles = []
    original = codec.decode

    def recording_decode(blob):
        handle = original(blob)
        handles.append(handle)
        return handle

    monkeypatch.setattr(codec, "decode", recording_decode)
    return handles


@pytest.fixture
def conn():
    """In-memory SQLite connection with every molcart function registered."""
    connection = sqlite3.connect(":memory:")
    register_functions(connection)
    yield connection
    connection.close()
