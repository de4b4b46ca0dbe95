"""Tests for molcart/structure/codec.py."""

import pytest
from rdkit import Chem

from molcart.base import StructureHandle
from molcart.errors import MalformedInput, ParseError, RenderError, SerializationError
from molcart.structure import codec
from molcart.structure.compare import compare


class TestParse:
    def test_smiles(self, ethanol_smiles):
        with codec.parse(ethanol_smiles) as handle:
            assert isinstance(handle, StructureHandle)
            assert handle.mol.GetNumAtoms() == 3

    def test_smarts(self):
        with codec.parse("[#6]-[#8]", as_pattern=True) as handle:
            assert handle.mol.GetNumAtoms() == 2

    @pytest.mark.parametrize("text", ["C1CC", "CC(", "Q"])
    def test_invalid_smiles(self, text):
        with pytest.raises(ParseError, match="Invalid SMILES"):
            codec.parse(text)

    def test_invalid_smarts(self):
        with pytest.raises(ParseError, match="Invalid SMARTS"):
            codec.parse("[#6", as_pattern=True)


class TestRender:
    def test_canonical_smiles(self):
        with codec.parse("OCC") as handle:
            assert codec.render(handle) == "CCO"

    def test_smarts_output_parses(self, ethanol_smiles):
        with codec.parse(ethanol_smiles) as handle:
            smarts = codec.render(handle, as_pattern=True)
        assert Chem.MolFromSmarts(smarts) is not None


class TestRenderFailures:
    @pytest.mark.parametrize(
        "writer, as_pattern", [("MolToSmiles", False), ("MolToSmarts", True)]
    )
    def test_toolkit_exception_mapped(self, monkeypatch, ethanol_smiles, writer, as_pattern):
        def boom(*args, **kwargs):
            raise RuntimeError("writer exploded")

        with codec.parse(ethanol_smiles) as handle:
            monkeypatch.setattr(codec.Chem, writer, boom)
            with pytest.raises(RenderError, match="writer exploded") as info:
                codec.render(handle, as_pattern=as_pattern)
        assert isinstance(info.value.__cause__, RuntimeError)


class TestPickle:
    def test_round_trip_compares_equal(self, aspirin_smiles):
        with codec.parse(aspirin_smiles) as original:
            with codec.decode(codec.encode(original)) as restored:
                assert compare(original, restored) == 0
                assert compare(restored, original) == 0

    def test_corrupt_pickle(self):
        with pytest.raises(MalformedInput):
            codec.decode(b"definitely not a pickle")

    def test_pickling_exception_mapped(self):
        class UnpicklableMol:
            def ToBinary(self):
                raise ValueError("cannot pickle")

        with StructureHandle(UnpicklableMol()) as handle:
            with pytest.raises(SerializationError, match="cannot pickle") as info:
                codec.encode(handle)
        assert isinstance(info.value.__cause__, ValueError)


class TestComposites:
    def test_text_blob_text(self, aspirin_smiles):
        expected = Chem.MolToSmiles(Chem.MolFromSmiles(aspirin_smiles))
        assert codec.blob_to_text(codec.text_to_blob(aspirin_smiles)) == expected

    def test_parse_error_propagates(self):
        with pytest.raises(ParseError):
            codec.text_to_blob("C1CC")

    def test_handle_released_on_success(self, monkeypatch, ethanol_smiles):
        created = []
        original = codec.parse

        def recording_parse(text, as_pattern=False):
            handle = original(text, as_pattern)
            created.append(handle)
            return handle

        monkeypatch.setattr(codec, "parse", recording_parse)
        codec.text_to_blob(ethanol_smiles)
        assert len(created) == 1
        assert created[0].closed

    def test_handle_released_on_failure(self, monkeypatch, ethanol_smiles):
        created = []
        original = codec.parse

        def recording_parse(text, as_pattern=False):
            handle = original(text, as_pattern)
            created.append(handle)
            return handle

        def failing_encode(handle):
            raise SerializationError("pickling refused")

        monkeypatch.setattr(codec, "parse", recording_parse)
        monkeypatch.setattr(codec, "encode", failing_encode)
        with pytest.raises(SerializationError):
            codec.text_to_blob(ethanol_smiles)
        assert created[0].closed

    def test_blob_to_text_releases(self, handle_log, ethanol_blob):
        assert codec.blob_to_text(ethanol_blob) == "CCO"
        assert [h.closed for h in handle_log] == [True]


class TestHandle:
    def test_use_after_release(self, ethanol_smiles):
        handle = codec.parse(ethanol_smiles)
        handle.release()
        assert handle.closed
        with pytest.raises(RuntimeError, match="after release"):
            handle.mol
