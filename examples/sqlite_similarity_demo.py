"""
SQLite Similarity Demo

Stores a few molecules and their Morgan fingerprints as blobs in an in-memory
SQLite table, then ranks them by Tanimoto similarity to a query.
"""

import sqlite3

from molcart.io import register_functions

SMILES = {
    "ethanol": "CCO",
    "aspirin": "CC(=O)Oc1ccccc1C(=O)O",
    "salicylic_acid": "O=C(O)c1ccccc1O",
    "benzene": "c1ccccc1",
}


def main() -> None:
    conn = sqlite3.connect(":memory:")
    register_functions(conn)

    conn.execute("CREATE TABLE compounds (name TEXT, molecule BLOB, fp BLOB)")
    for name, smiles in SMILES.items():
        conn.execute(
            "INSERT INTO compounds VALUES (?, mol(?), mol_morgan_bfp(mol(?), 2))",
            (name, smiles, smiles),
        )

    query = "OC(=O)c1ccccc1"
    rows = conn.execute(
        "SELECT name, mol_smiles(molecule), "
        "bfp_tanimoto(fp, mol_morgan_bfp(mol(?), 2)) AS sim "
        "FROM compounds ORDER BY sim DESC",
        (query,),
    ).fetchall()

    print(f"Query: {query}")
    for name, smiles, sim in rows:
        print(f"{sim:6.3f}  {name:<16s} {smiles}")

    try:
        conn.execute("SELECT bfp_tanimoto(bfp_dummy(4, 255), bfp_dummy(8, 255))").fetchone()
    except sqlite3.OperationalError as exc:
        print(f"Length mismatch signaled: {exc}")


if __name__ == "__main__":
    main()
