"""
Tests for typed wire values.
"""

import pytest
from pydantic import ValidationError

from hsi.core.variant import Variant, vardict_items
from hsi.errors import PreconditionViolation


class TestSignatureChecks:
    """Values must match their signature."""

    def test_basic_constructors(self):
        assert Variant.string("x").signature == "s"
        assert Variant.strv(["a", "b"]).signature == "as"
        assert Variant.uint64(1).signature == "t"
        assert Variant.uint32(1).signature == "u"
        assert Variant.vardict({}).signature == "a{sv}"

    def test_uint32_range(self):
        with pytest.raises(ValidationError):
            Variant.uint32(2**32)
        with pytest.raises(ValidationError):
            Variant.uint32(-1)

    def test_uint64_range(self):
        assert Variant.uint64(2**64 - 1).value == 2**64 - 1
        with pytest.raises(ValidationError):
            Variant.uint64(2**64)

    def test_string_type(self):
        with pytest.raises(ValidationError):
            Variant(signature="s", value=5)

    def test_strv_items(self):
        with pytest.raises(ValidationError):
            Variant.strv(["a", 1])

    def test_vardict_values_must_be_variants(self):
        with pytest.raises(ValidationError):
            Variant(signature="a{sv}", value={"Name": "raw"})

    def test_tuple_signature_from_children(self):
        inner = Variant.vardict({"Name": Variant.string("x")})

        assert Variant.tuple_of(inner).signature == "(a{sv})"

    def test_tuple_signature_mismatch(self):
        with pytest.raises(ValidationError):
            Variant(signature="(s)", value=(Variant.uint32(1),))

    def test_typed_array_elements(self):
        """Arrays with a concrete element type reject other children."""
        with pytest.raises(ValidationError):
            Variant.array([Variant.string("x")], "a{sv}")

    def test_unsupported_signature(self):
        with pytest.raises(ValidationError):
            Variant(signature="d", value=1.0)


class TestContainers:
    """Tests for child access."""

    def test_child_value(self):
        first = Variant.vardict({})
        second = Variant.string("x")
        container = Variant.array([first, second])

        assert container.signature == "av"
        assert container.n_children() == 2
        assert container.child_value(1) == second
        assert container.children() == [first, second]

    def test_child_out_of_range(self):
        with pytest.raises(PreconditionViolation):
            Variant.tuple_of().child_value(0)

    def test_not_a_container(self):
        with pytest.raises(PreconditionViolation):
            Variant.string("x").child_value(0)
        with pytest.raises(PreconditionViolation):
            Variant.vardict({}).children()

    def test_vardict_items_order(self):
        value = Variant.vardict({"b": Variant.uint32(2), "a": Variant.uint32(1)})

        assert [key for key, _ in vardict_items(value)] == ["b", "a"]

    def test_vardict_items_wrong_type(self):
        with pytest.raises(PreconditionViolation):
            vardict_items(Variant.string("x"))


class TestRendering:
    """Tests for unpacking and the text form."""

    def test_unpack(self):
        value = Variant.tuple_of(
            Variant.vardict({"Checksum": Variant.strv(["a"]), "HsiNumber": Variant.uint32(2)})
        )

        assert value.unpack() == ({"Checksum": ["a"], "HsiNumber": 2},)

    def test_print_text_vardict(self):
        value = Variant.vardict(
            {
                "AppstreamId": Variant.string("com.intel.BiosGuard"),
                "Checksum": Variant.strv(["a", "b"]),
                "TrustFlags": Variant.uint64(513),
                "HsiNumber": Variant.uint32(1),
            }
        )

        assert str(value) == (
            "{'AppstreamId': <'com.intel.BiosGuard'>, 'Checksum': <['a', 'b']>, "
            "'TrustFlags': <uint64 513>, 'HsiNumber': <uint32 1>}"
        )

    def test_print_text_empty(self):
        assert str(Variant.vardict({})) == "@a{sv} {}"
        assert str(Variant.strv([])) == "@as []"

    def test_print_text_single_tuple(self):
        assert str(Variant.tuple_of(Variant.vardict({}))) == "(@a{sv} {},)"

    def test_print_text_quotes(self):
        assert str(Variant.string("it's")) == "'it\\'s'"
