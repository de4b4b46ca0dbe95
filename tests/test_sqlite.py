"""Tests for molcart/io/sqlite.py."""

import sqlite3

import pytest

from molcart.functions import FUNCTION_SPECS
from molcart.io import register_functions


def _scalar(conn, sql, params=()):
    return conn.execute(sql, params).fetchone()[0]


class TestRegistration:
    def test_registers_everything(self):
        connection = sqlite3.connect(":memory:")
        assert register_functions(connection) == list(FUNCTION_SPECS)
        connection.close()

    def test_subset(self):
        connection = sqlite3.connect(":memory:")
        assert register_functions(connection, ["bfp_dummy"]) == ["bfp_dummy"]
        assert _scalar(connection, "SELECT bfp_dummy(2, 1)") == b"\x01\x01"
        with pytest.raises(sqlite3.OperationalError):
            connection.execute("SELECT bfp_length(bfp_dummy(2, 1))")
        connection.close()

    def test_unknown_name(self):
        connection = sqlite3.connect(":memory:")
        with pytest.raises(ValueError, match="Unknown function"):
            register_functions(connection, ["mol_frobnicate"])
        connection.close()


class TestQueries:
    def test_smiles_round_trip(self, conn):
        assert _scalar(conn, "SELECT mol_smiles(mol('OCC'))") == "CCO"

    def test_blob_storage_and_similarity(self, conn, aspirin_smiles, phenol_smiles):
        conn.execute("CREATE TABLE compounds (name TEXT, molecule BLOB)")
        conn.executemany(
            "INSERT INTO compounds VALUES (?, mol(?))",
            [("aspirin", aspirin_smiles), ("phenol", phenol_smiles)],
        )
        rows = conn.execute(
            "SELECT name, bfp_tanimoto(mol_morgan_bfp(molecule, 2), "
            "mol_morgan_bfp(mol(?), 2)) AS sim FROM compounds ORDER BY sim DESC",
            (aspirin_smiles,),
        ).fetchall()
        assert rows[0] == ("aspirin", 1.0)
        assert 0.0 <= rows[1][1] < 1.0

    def test_substructure_filter(self, conn):
        conn.execute("CREATE TABLE compounds (smiles TEXT, molecule BLOB)")
        for smiles in ("CCO", "c1ccccc1", "Oc1ccccc1"):
            conn.execute("INSERT INTO compounds VALUES (?, mol(?))", (smiles, smiles))
        hits = conn.execute(
            "SELECT smiles FROM compounds "
            "WHERE mol_is_substruct(molecule, mol('c1ccccc1')) ORDER BY smiles"
        ).fetchall()
        assert [h[0] for h in hits] == ["Oc1ccccc1", "c1ccccc1"]

    def test_descriptor(self, conn):
        assert _scalar(conn, "SELECT mol_num_hvyatms(mol('CCO'))") == 3


class TestErrors:
    def test_type_mismatch(self, conn):
        with pytest.raises(sqlite3.OperationalError):
            conn.execute("SELECT mol_smiles('CCO')").fetchone()

    def test_parse_error(self, conn):
        with pytest.raises(sqlite3.OperationalError):
            conn.execute("SELECT mol('C1CC')").fetchone()

    def test_length_mismatch(self, conn):
        with pytest.raises(sqlite3.OperationalError):
            conn.execute("SELECT bfp_tanimoto(bfp_dummy(4, 255), bfp_dummy(8, 255))").fetchone()
