from datetime import datetime
import xmlrpc.client

import pytest

from confluence_rpc import marshal
from confluence_rpc.errors import LocalPreconditionError
from confluence_rpc.session import Session
from confluence_rpc.wire import RemoteValue, WireType


def test_page_record_types_fields_by_name() -> None:
    value = marshal.page({"version": 3, "current": True, "title": "Home"})
    assert value.kind is WireType.STRUCT
    assert value.fields["version"] == RemoteValue(WireType.INTEGER, 3)
    assert value.fields["current"] == RemoteValue(WireType.BOOLEAN, True)
    assert value.fields["title"] == RemoteValue(WireType.STRING, "Home")
    assert value.to_wire() == {"version": 3, "current": True, "title": "Home"}


def test_page_record_coerces_locks_and_home_page() -> None:
    value = marshal.page({"locks": "2", "homePage": "false", "id": 98307, "space": "DOC"})
    assert value.to_wire() == {"locks": 2, "homePage": False, "id": "98307", "space": "DOC"}


def test_page_record_does_not_mutate_input() -> None:
    record = {"version": "4", "title": "Home"}
    marshal.page(record)
    assert record == {"version": "4", "title": "Home"}


def test_attachment_record_is_all_strings() -> None:
    value = marshal.attachment({"fileName": "a.png", "fileSize": 120, "comment": None})
    assert {name: field.kind for name, field in value.fields.items()} == {
        "fileName": WireType.STRING,
        "fileSize": WireType.STRING,
        "comment": WireType.STRING,
    }
    assert value.to_wire() == {"fileName": "a.png", "fileSize": "120", "comment": ""}


def test_space_record_uses_each_field_value() -> None:
    value = marshal.space({"key": "DOC", "name": "Documentation", "description": "All docs"})
    assert value.to_wire() == {"key": "DOC", "name": "Documentation", "description": "All docs"}


def test_page_update_options_minor_edit_is_boolean() -> None:
    value = marshal.page_update_options({"versionComment": "typo", "minorEdit": "yes"})
    assert value.to_wire() == {"versionComment": "typo", "minorEdit": True}


@pytest.mark.parametrize("marshaler", [marshal.page, marshal.space, marshal.attachment])
def test_record_marshalers_reject_non_mappings(marshaler) -> None:
    with pytest.raises(LocalPreconditionError) as err:
        marshaler(["not", "a", "mapping"])
    assert err.value.code == "MISSING_ARGUMENT"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("yes", True), ("TRUE", True), ("1", True), ("no", False), ("false", False), ("", False), (0, False), (2, True)],
)
def test_boolean_reads_common_spellings(raw, expected) -> None:
    assert marshal.boolean(raw).value is expected


def test_scalar_marshalers() -> None:
    assert marshal.integer("7") == RemoteValue(WireType.INTEGER, 7)
    assert marshal.long(" 12345678901 ") == RemoteValue(WireType.LONG, "12345678901")
    assert marshal.long(12345678901).to_wire() == "12345678901"
    assert marshal.string(None).value == ""
    assert marshal.string(True).value == "true"
    assert marshal.string("café".encode("utf-8")).value == "café"
    assert marshal.base64("café").value == b"caf\xc3\xa9"


def test_base64_wire_value_is_binary() -> None:
    wire = marshal.base64(b"\x00\x01").to_wire()
    assert isinstance(wire, xmlrpc.client.Binary)
    assert wire == b"\x00\x01"


def test_marshalers_accept_values_already_of_their_type() -> None:
    value = marshal.integer(5)
    assert marshal.integer(value) is value
    record = marshal.page({"title": "x"})
    assert marshal.page(record) is record


def test_string_rewraps_other_remote_values() -> None:
    assert marshal.string(marshal.integer(42)) == RemoteValue(WireType.STRING, "42")


def test_session_bound_marshalers_match_module_functions(wiki) -> None:
    assert wiki.integer("3") == marshal.integer("3")
    assert wiki.boolean("no") == marshal.boolean("no")
    assert wiki.page({"version": 1}) == marshal.page({"version": 1})
    assert Session.string(42) == marshal.string(42)


def test_string_sends_datetimes_in_iso8601_form() -> None:
    value = marshal.page({"created": datetime(2010, 3, 11, 12, 0, 5), "title": "Home"})
    assert value.to_wire() == {"created": "20100311T12:00:05", "title": "Home"}
