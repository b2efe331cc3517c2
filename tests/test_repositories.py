"""
Tests for the file-backed repositories.

Covers:
- CartStore save/load round trip and the versioned snapshot layout
- NotFound vs DecodeFailure vs StorageError on load
- load_or_default for a missing file
- exists / size / delete queries
- OperationLog append-only behaviour
"""

import json
import re

import pytest

from app.exceptions import (
    DecodeFailureError,
    InvalidArgumentError,
    NotFoundError,
    StorageError,
)
from domain.models import Item
from repositories import CartStore, OperationLog
from test_fixtures import (
    cart_store,
    make_item,
    make_sample_items,
    operation_log,
    write_snapshot,
)


# =============================================================================
# CART STORE
# =============================================================================


def test_round_trip_preserves_items_and_order(tmp_path, cart_store):
    items = make_sample_items() + [make_item(1, "Laptop", 1200.0)]
    path = tmp_path / "cart.json"

    written = cart_store.save(items, path)
    loaded = cart_store.load(path)

    assert written == 4
    assert loaded == items
    assert [i.id for i in loaded] == [1, 2, 3, 1]


def test_round_trip_of_empty_cart(tmp_path, cart_store):
    path = tmp_path / "empty.json"
    cart_store.save([], path)
    assert cart_store.load(path) == []


def test_round_trip_keeps_discounted_prices(tmp_path, cart_store):
    item = make_item(1, "Laptop", 999.99)
    item.apply_discount(33)
    path = tmp_path / "cart.json"

    cart_store.save([item], path)

    assert cart_store.load(path)[0].price == item.price


def test_snapshot_is_versioned_json(tmp_path, cart_store):
    path = tmp_path / "cart.json"
    cart_store.save(make_sample_items()[:1], path)

    payload = json.loads(path.read_text(encoding="utf-8"))

    assert payload == {
        "format_version": 1,
        "items": [{"id": 1, "name": "Laptop", "price": 1200.0}],
    }


def test_load_accepts_hand_written_snapshot(tmp_path, cart_store):
    path = write_snapshot(tmp_path / "cart.json")
    assert cart_store.load(path) == make_sample_items()


def test_save_overwrites_previous_snapshot(tmp_path, cart_store):
    path = tmp_path / "cart.json"
    cart_store.save(make_sample_items(), path)
    cart_store.save([make_item(9, "Desk", 300.0)], path)

    assert cart_store.load(path) == [Item(9, "Desk", 300.0)]


def test_load_missing_file_raises_not_found(tmp_path, cart_store):
    with pytest.raises(NotFoundError):
        cart_store.load(tmp_path / "never-saved.json")


def test_load_or_default_missing_file_returns_empty(tmp_path, cart_store):
    assert cart_store.load_or_default(tmp_path / "never-saved.json") == []


def test_load_or_default_existing_file_loads(tmp_path, cart_store):
    path = write_snapshot(tmp_path / "cart.json")
    assert len(cart_store.load_or_default(path)) == 3


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        "",
        "[1, 2, 3]",
        '{"format_version": 1, "items": [{"id": 1, "name": "Laptop"}]}',
        '{"format_version": 1, "items": [{"id": "x", "name": "A", "price": 1}]}',
        '{"format_version": 1, "items": [{"id": 1, "name": "A", "price": -5}]}',
        '{"format_version": 1, "items": [null]}',
        '{"format_version": 1, "items": [], "extra": true}',
    ],
)
def test_load_corrupt_content_raises_decode_failure(tmp_path, cart_store, content):
    path = tmp_path / "cart.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(DecodeFailureError):
        cart_store.load(path)


def test_load_unsupported_version_raises_decode_failure(tmp_path, cart_store):
    path = write_snapshot(tmp_path / "cart.json", format_version=2)

    with pytest.raises(DecodeFailureError) as exc_info:
        cart_store.load(path)

    assert exc_info.value.details["format_version"] == 2


def test_load_non_finite_price_raises_decode_failure(tmp_path, cart_store):
    path = write_snapshot(tmp_path / "cart.json", items=[(1, "Laptop", float("inf"))])

    with pytest.raises(DecodeFailureError):
        cart_store.load(path)


def test_load_binary_content_raises_decode_failure(tmp_path, cart_store):
    path = tmp_path / "cart.json"
    path.write_bytes(b"\xac\xed\x00\x05sr\x00\x13java.util.ArrayList\xff")

    with pytest.raises(DecodeFailureError):
        cart_store.load(path)


def test_load_or_default_still_reports_decode_failure(tmp_path, cart_store):
    path = tmp_path / "cart.json"
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(DecodeFailureError):
        cart_store.load_or_default(path)


def test_load_directory_raises_storage_error(tmp_path, cart_store):
    folder = tmp_path / "a-directory"
    folder.mkdir()

    with pytest.raises(StorageError):
        cart_store.load(folder)


def test_save_null_items_rejected(tmp_path, cart_store):
    with pytest.raises(InvalidArgumentError):
        cart_store.save(None, tmp_path / "cart.json")


def test_save_null_entry_rejected(tmp_path, cart_store):
    with pytest.raises(InvalidArgumentError):
        cart_store.save([make_item(), None], tmp_path / "cart.json")


def test_save_into_missing_directory_raises_storage_error(tmp_path, cart_store):
    with pytest.raises(StorageError):
        cart_store.save(make_sample_items(), tmp_path / "missing" / "cart.json")


def test_exists_size_and_delete(tmp_path, cart_store):
    """
    Verifies:
    - exists() reflects the file state
    - size() returns bytes on disk, NotFoundError when absent
    - delete() returns True once, then False
    """
    path = tmp_path / "cart.json"
    assert cart_store.exists(path) is False

    cart_store.save(make_sample_items(), path)
    assert cart_store.exists(path) is True
    assert cart_store.size(path) == len(path.read_bytes())

    assert cart_store.delete(path) is True
    assert cart_store.exists(path) is False
    assert cart_store.delete(path) is False

    with pytest.raises(NotFoundError):
        cart_store.size(path)


def test_exists_accepts_string_paths(tmp_path, cart_store):
    path = write_snapshot(tmp_path / "cart.json")
    assert cart_store.exists(str(path)) is True


# =============================================================================
# OPERATION LOG
# =============================================================================

LINE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?: (.*)$")


def test_append_creates_file_and_parent_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "ops.log"
    log = OperationLog()

    log.append("Cart saved", path)

    assert path.exists()
    lines = log.read_lines(path)
    assert len(lines) == 1
    match = LINE_PATTERN.match(lines[0])
    assert match is not None
    assert match.group(2) == "Cart saved"


def test_append_never_truncates(tmp_path, operation_log):
    operation_log.append("first")
    operation_log.append("second")
    operation_log.append("third")

    messages = [LINE_PATTERN.match(line).group(2) for line in operation_log.read_lines()]
    assert messages == ["first", "second", "third"]


def test_append_to_existing_file_keeps_content(tmp_path):
    path = tmp_path / "ops.log"
    path.write_text("pre-existing line\n", encoding="utf-8")

    OperationLog(path).append("new line")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "pre-existing line"
    assert lines[1].endswith(": new line")


def test_append_without_destination_rejected():
    with pytest.raises(InvalidArgumentError):
        OperationLog().append("nowhere to go")


def test_append_to_directory_raises_storage_error(tmp_path):
    with pytest.raises(StorageError):
        OperationLog().append("message", tmp_path)


def test_read_lines_of_missing_log_is_empty(tmp_path):
    assert OperationLog(tmp_path / "none.log").read_lines() == []
