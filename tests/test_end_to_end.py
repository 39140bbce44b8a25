"""
encrypt_storage — End-to-End Tests
==================================
Run with: python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from encrypt_storage.storage import (
    DecryptionError,
    EncryptStorage,
    EventType,
    InvalidSecretKeyError,
    MemoryBackend,
    StorageConfig,
    StorageContext,
    set_default_context,
)


SECRET = "abcdefghij"


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def context():
    return StorageContext.in_memory()


@pytest.fixture
def events():
    return []


@pytest.fixture
def storage(context, events):
    return EncryptStorage(SECRET, context=context, notify_handler=events.append)


@pytest.fixture
def prefixed(context, events):
    return EncryptStorage(SECRET, context=context, prefix="app",
                          notify_handler=events.append)


@pytest.fixture(autouse=True)
def no_default_context():
    set_default_context(None)
    yield
    set_default_context(None)


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:
    def test_short_secret_raises(self, context):
        with pytest.raises(InvalidSecretKeyError):
            EncryptStorage("short", context=context)

    def test_short_secret_fails_before_store_access(self):
        class ExplodingContext(StorageContext):
            def get(self, storage_type):
                raise AssertionError("store touched")

        with pytest.raises(InvalidSecretKeyError):
            EncryptStorage("short", context=ExplodingContext())

    def test_ten_character_secret_accepted(self, context):
        assert EncryptStorage(SECRET, context=context) is not None

    def test_secret_not_kept_on_instance(self, storage):
        assert SECRET not in repr(storage)
        assert SECRET not in repr(vars(storage))

    def test_session_scope_uses_session_store(self, context):
        s = EncryptStorage(SECRET, context=context, storage_type="session")
        s.set_item("k", 1)
        assert context.session.length == 1
        assert context.local.length == 0

    def test_browser_alias_scope_name(self, context):
        s = EncryptStorage(SECRET, {"storage_type": "sessionStorage"}, context=context)
        assert s.config.storage_type == "session"
        assert s.storage is context.session

    def test_preset_config(self, context):
        s = EncryptStorage(SECRET, "session", context=context)
        assert s.config.prefix == "session"
        assert s.storage is context.session

    def test_config_object(self, context):
        cfg = StorageConfig(prefix="cfg")
        s = EncryptStorage(SECRET, cfg, context=context)
        s.set_item("a", 1)
        assert context.local.keys() == ["cfg:a"]


# ── Set / Get ─────────────────────────────────────────────────────────────────

class TestSetGet:
    def test_prefixed_scenario(self, prefixed, context):
        prefixed.set_item("user", {"id": 1})
        assert context.local.keys() == ["app:user"]
        raw = context.local.get_item("app:user")
        assert raw != '{"id":1}'
        assert prefixed.get_item("user") == {"id": 1}

    @pytest.mark.parametrize("value", [
        {"name": "Ana", "tags": ["a", "b"], "nested": {"x": None}},
        [1, 2, 3],
        42,
        3.5,
        True,
        "plain text",
    ])
    def test_round_trip(self, storage, value):
        storage.set_item("k", value)
        assert storage.get_item("k") == value

    def test_overwrite_replaces_value(self, storage, context):
        storage.set_item("k", "first")
        storage.set_item("k", "second")
        assert storage.get_item("k") == "second"
        assert context.local.length == 1

    def test_numeric_string_comes_back_parsed(self, storage):
        storage.set_item("k", "123")
        assert storage.get_item("k") == 123

    def test_missing_key_returns_none(self, storage):
        assert storage.get_item("missing") is None

    def test_missing_key_notifies_once(self, storage, events):
        storage.get_item("missing")
        assert events == [{"type": "get", "key": "missing", "value": None}]

    def test_empty_string_is_a_present_record(self, storage, context):
        storage.set_item("k", "", skip_encryption=True)
        assert context.local.get_item("k") == ""
        assert storage.get_item("k", skip_decryption=True) == ""

    def test_ciphertext_differs_between_writes(self, storage, context):
        storage.set_item("a", "same")
        storage.set_item("b", "same")
        assert context.local.get_item("a") != context.local.get_item("b")

    def test_set_notifies_with_encoded_plaintext(self, storage, events):
        storage.set_item("user", {"id": 1})
        assert events == [{"type": "set", "key": "user", "value": '{"id":1}'}]

    def test_get_notifies_with_decoded_value(self, storage, events):
        storage.set_item("user", {"id": 1})
        events.clear()
        storage.get_item("user")
        assert events == [{"type": "get", "key": "user", "value": {"id": 1}}]

    def test_wrong_secret_raises(self, storage, context):
        storage.set_item("k", "v")
        other = EncryptStorage("another-secret-key", context=context)
        with pytest.raises(DecryptionError):
            other.get_item("k")

    def test_same_secret_second_instance_reads(self, storage, context):
        storage.set_item("k", {"a": 1})
        other = EncryptStorage(SECRET, context=context)
        assert other.get_item("k") == {"a": 1}


# ── Bypass ────────────────────────────────────────────────────────────────────

class TestBypass:
    def test_per_call_bypass_stores_encoded_value(self, storage, context):
        storage.set_item("k", {"id": 1}, skip_encryption=True)
        assert context.local.get_item("k") == '{"id":1}'
        assert storage.get_item("k", skip_decryption=True) == {"id": 1}

    def test_global_bypass(self, context):
        s = EncryptStorage(SECRET, context=context, skip_encryption=True)
        s.set_item("k", [1, 2])
        assert context.local.get_item("k") == "[1,2]"
        assert s.get_item("k") == [1, 2]

    def test_plaintext_record_read_with_decryption_raises(self, storage):
        storage.set_item("k", "hello", skip_encryption=True)
        with pytest.raises(DecryptionError):
            storage.get_item("k")


# ── State management mode ─────────────────────────────────────────────────────

class TestStateManagement:
    def test_returns_encoded_string(self, context, events):
        s = EncryptStorage(SECRET, context=context, state_management_use=True,
                           notify_handler=events.append)
        s.set_item("state", {"count": 2})
        events.clear()
        assert s.get_item("state") == '{"count":2}'
        assert events == [{"type": "get", "key": "state", "value": '{"count":2}'}]

    def test_bypassed_record_returns_encoded_string(self, context):
        s = EncryptStorage(SECRET, context=context, state_management_use=True)
        s.set_item("state", {"count": 3}, skip_encryption=True)
        assert context.local.get_item("state") == '{"count":3}'
        assert s.get_item("state", skip_decryption=True) == '{"count":3}'

    def test_global_bypass_returns_encoded_string(self, context):
        s = EncryptStorage(SECRET, context=context, state_management_use=True,
                           skip_encryption=True)
        s.set_item("state", [1, 2])
        assert context.local.get_item("state") == "[1,2]"
        assert s.get_item("state") == "[1,2]"


# ── Remove / Clear / Length / Key ─────────────────────────────────────────────

class TestStoreSemantics:
    def test_remove_then_get(self, storage, events):
        storage.set_item("k", 1)
        storage.remove_item("k")
        assert storage.get_item("k") is None
        assert {"type": "remove", "key": "k"} in events

    def test_remove_absent_key_is_noop(self, storage, events):
        storage.remove_item("nothing")
        assert events == [{"type": "remove", "key": "nothing"}]

    def test_clear(self, storage, events):
        storage.set_item("a", 1)
        storage.set_item("b", 2)
        storage.clear()
        assert events[-1] == {"type": "clear"}
        assert storage.length == 0
        assert storage.get_item("a") is None
        assert storage.get_item("b") is None

    def test_length_notifies(self, storage, events):
        storage.set_item("a", 1)
        storage.set_item("b", 2)
        events.clear()
        assert storage.length == 2
        assert events == [{"type": "length", "value": 2}]

    def test_len_builtin(self, storage):
        storage.set_item("a", 1)
        assert len(storage) == 1

    def test_key_returns_physical_key(self, prefixed, events):
        prefixed.set_item("first", 1)
        prefixed.set_item("second", 2)
        events.clear()
        assert prefixed.key(1) == "app:second"
        assert events == [{"type": "key", "index": 1, "value": "app:second"}]

    def test_key_out_of_range(self, storage, events):
        assert storage.key(5) is None
        assert events == [{"type": "key", "index": 5, "value": None}]


# ── Pattern operations ────────────────────────────────────────────────────────

class TestPatterns:
    def test_remove_substring(self, storage, context):
        for k in ("foo1", "foo2", "barfoo", "baz"):
            storage.set_item(k, k)
        storage.remove_item_from_pattern("foo")
        assert context.local.keys() == ["baz"]

    def test_remove_notifies_logical_keys_once(self, prefixed, events):
        prefixed.set_item("foo1", 1)
        prefixed.set_item("foo2", 2)
        events.clear()
        prefixed.remove_item_from_pattern("foo")
        assert events == [{"type": "remove", "key": ["foo1", "foo2"]}]

    def test_remove_no_match_emits_nothing(self, storage, events):
        storage.set_item("a", 1)
        events.clear()
        storage.remove_item_from_pattern("zzz")
        assert events == []
        assert storage.get_item("a") == 1

    def test_remove_exact(self, storage, context):
        storage.set_item("foo", 1)
        storage.set_item("foobar", 2)
        storage.remove_item_from_pattern("foo", exact=True)
        assert context.local.keys() == ["foobar"]

    def test_remove_respects_prefix(self, context):
        a = EncryptStorage(SECRET, context=context, prefix="app")
        b = EncryptStorage(SECRET, context=context, prefix="web")
        a.set_item("token", 1)
        b.set_item("token", 2)
        a.remove_item_from_pattern("token")
        assert context.local.keys() == ["web:token"]
        assert b.get_item("token") == 2

    def test_overlapping_prefixes_stay_separate(self, context):
        mine = EncryptStorage(SECRET, context=context, prefix="app")
        theirs = EncryptStorage(SECRET, context=context, prefix="myapp")
        theirs.set_item("token", "T")
        context.local.set_item("happy", "plain")

        assert mine.get_item_from_pattern("token") is None
        assert mine.get_item_from_pattern("token", multiple=False) is None
        assert mine.get_item_from_pattern("ap") is None

        mine.remove_item_from_pattern("token")
        mine.remove_item_from_pattern("ap")
        assert theirs.get_item("token") == "T"
        assert context.local.get_item("happy") == "plain"

    def test_overlapping_prefixes_both_branches_agree(self, context, events):
        mine = EncryptStorage(SECRET, context=context, prefix="app",
                              notify_handler=events.append)
        theirs = EncryptStorage(SECRET, context=context, prefix="myapp")
        theirs.set_item("token", "theirs")
        mine.set_item("token", "mine")
        events.clear()

        assert mine.get_item_from_pattern("token") == {"token": "mine"}
        assert mine.get_item_from_pattern("token", multiple=False) == "mine"
        assert events[-1] == {"type": "get", "key": "token", "value": "mine"}

        mine.remove_item_from_pattern("token")
        assert context.local.keys() == ["myapp:token"]

    def test_get_multiple(self, prefixed, events):
        prefixed.set_item("user:1", {"id": 1})
        prefixed.set_item("user:2", {"id": 2})
        prefixed.set_item("other", 0)
        events.clear()
        result = prefixed.get_item_from_pattern("user")
        assert result == {"user:1": {"id": 1}, "user:2": {"id": 2}}
        assert events == [{
            "type": "get",
            "key": ["user:1", "user:2"],
            "value": {"user:1": {"id": 1}, "user:2": {"id": 2}},
        }]

    def test_get_single(self, storage, events):
        storage.set_item("item_a", "A")
        storage.set_item("item_b", "B")
        events.clear()
        assert storage.get_item_from_pattern("item", multiple=False) == "A"
        assert events == [{"type": "get", "key": "item_a", "value": "A"}]

    def test_get_exact(self, storage):
        storage.set_item("foo", 1)
        storage.set_item("foobar", 2)
        assert storage.get_item_from_pattern("foo", exact=True) == {"foo": 1}

    def test_get_no_match_returns_none(self, storage):
        storage.set_item("a", 1)
        assert storage.get_item_from_pattern("zzz") is None
        assert storage.get_item_from_pattern("zzz", multiple=False) is None

    def test_skip_decryption_applies_to_every_match(self, storage):
        storage.set_item("p1", 1, skip_encryption=True)
        storage.set_item("p2", 2, skip_encryption=True)
        assert storage.get_item_from_pattern("p", skip_decryption=True) == {"p1": 1, "p2": 2}
        assert storage.get_item_from_pattern("p", multiple=False, skip_decryption=True) == 1


# ── Out-of-band crypto ────────────────────────────────────────────────────────

class TestCryptoHelpers:
    def test_string_round_trip(self, storage, events):
        ct = storage.encrypt_string("hello")
        assert ct != "hello"
        assert storage.decrypt_string(ct) == "hello"
        assert events == []

    def test_value_round_trip(self, storage):
        ct = storage.encrypt_value({"a": [1, 2]})
        assert storage.decrypt_value(ct) == {"a": [1, 2]}

    def test_helpers_do_not_touch_store(self, storage, context):
        storage.encrypt_value({"a": 1})
        assert context.local.length == 0

    def test_decrypt_garbage_raises(self, storage):
        with pytest.raises(DecryptionError):
            storage.decrypt_string("not a ciphertext")


# ── No storage context ────────────────────────────────────────────────────────

class TestNoContext:
    def test_operations_are_noops(self, events):
        s = EncryptStorage(SECRET, notify_handler=events.append)
        s.set_item("k", 1)
        assert s.get_item("k") is None
        assert s.length == 0
        assert s.key(0) is None
        assert s.get_item_from_pattern("k") is None
        s.remove_item("k")
        s.remove_item_from_pattern("k")
        s.clear()
        assert not s.storage

    def test_default_context_used(self):
        ctx = StorageContext(local=MemoryBackend())
        set_default_context(ctx)
        s = EncryptStorage(SECRET)
        s.set_item("k", 1)
        assert ctx.local.keys() == ["k"]

    def test_explicit_context_wins_over_default(self, context):
        set_default_context(StorageContext.in_memory())
        s = EncryptStorage(SECRET, context=context)
        assert s.storage is context.local


# ── Logging ───────────────────────────────────────────────────────────────────

class TestLogging:
    def test_operations_logged_without_values(self, storage):
        storage.set_item("user", {"password": "hunter2"})
        storage.get_item("user")
        entries = storage.logger.get_entries()
        assert [e["operation"] for e in entries] == ["init", "set_item", "get_item"]
        assert "hunter2" not in repr(entries)
        assert SECRET not in repr(entries)

    def test_event_types_cover_all_operations(self, storage, events):
        storage.set_item("a", 1)
        storage.get_item("a")
        storage.key(0)
        storage.length
        storage.remove_item("a")
        storage.clear()
        assert {e["type"] for e in events} == set(EventType.ALL)
