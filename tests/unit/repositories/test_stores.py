"""
Unit tests for the in-memory stores

Tests UserRegistry, SessionTable and TaskStore directly, without services
"""
import pytest

from todo_app.core.credentials import CredentialPolicy, PlaintextCredentialPolicy
from todo_app.core.domain.identity import Identity
from todo_app.core.domain.task import TaskId
from todo_app.core.repositories import UserRegistry, SessionTable, TaskStore
from todo_app.core.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    TaskNotFoundError
)

A = Identity("aaaaa-aa")
B = Identity("bbbbb-bb")


@pytest.fixture
def registry(clock):
    return UserRegistry(clock)


@pytest.fixture
def sessions():
    return SessionTable()


@pytest.fixture
def store():
    return TaskStore()


class TestUserRegistry:
    """Test registration and verification"""

    def test_register_and_verify(self, registry):
        account = registry.register("alice", "pw1")
        assert account.username == "alice"
        assert account.created_at == 1000
        assert registry.verify("alice", "pw1") == account

    def test_duplicate_username_keeps_original(self, registry):
        registry.register("alice", "pw1")

        with pytest.raises(DuplicateUsernameError):
            registry.register("alice", "other")

        assert registry.count() == 1
        assert registry.verify("alice", "pw1").username == "alice"
        with pytest.raises(InvalidCredentialsError):
            registry.verify("alice", "other")

    def test_verify_unknown_user(self, registry):
        with pytest.raises(InvalidCredentialsError, match="Invalid username or password"):
            registry.verify("nobody", "pw")

    def test_verify_wrong_credential(self, registry):
        registry.register("alice", "pw1")
        with pytest.raises(InvalidCredentialsError):
            registry.verify("alice", "PW1")

    def test_get(self, registry):
        registry.register("alice", "pw1")
        assert registry.get("alice").username == "alice"
        assert registry.get("bob") is None
        assert "alice" in registry

    def test_credential_policy_is_used(self, clock):
        class ReversingPolicy(CredentialPolicy):
            def prepare(self, credential):
                return credential[::-1]

            def matches(self, stored, submitted):
                return stored == submitted[::-1]

        registry = UserRegistry(clock, ReversingPolicy())
        account = registry.register("alice", "abc")
        assert account.credential == "cba"
        assert registry.verify("alice", "abc") is account


class TestPlaintextCredentialPolicy:

    def test_roundtrip(self):
        policy = PlaintextCredentialPolicy()
        stored = policy.prepare("pw")
        assert policy.matches(stored, "pw")
        assert not policy.matches(stored, "pw ")

    def test_non_ascii(self):
        policy = PlaintextCredentialPolicy()
        assert policy.matches(policy.prepare("mật khẩu"), "mật khẩu")

    def test_lone_surrogate_is_a_mismatch_not_an_error(self):
        policy = PlaintextCredentialPolicy()
        assert not policy.matches(policy.prepare("pw"), "\ud800")
        assert policy.matches(policy.prepare("\ud800"), "\ud800")

    def test_verify_lone_surrogate(self, registry):
        registry.register("alice", "pw1")
        with pytest.raises(InvalidCredentialsError):
            registry.verify("alice", "\ud800")


class TestSessionTable:
    """Test session binding"""

    def test_resolve_without_session(self, sessions):
        with pytest.raises(NotAuthenticatedError):
            sessions.resolve(A)

    def test_start_and_resolve(self, sessions):
        assert sessions.start_session(A, "alice") is None
        assert sessions.resolve(A) == "alice"

    def test_later_login_overwrites(self, sessions):
        sessions.start_session(A, "alice")
        assert sessions.start_session(A, "bob") == "alice"
        assert sessions.resolve(A) == "bob"
        assert sessions.count() == 1

    def test_end_session(self, sessions):
        sessions.start_session(A, "alice")
        sessions.end_session(A)
        with pytest.raises(NotAuthenticatedError):
            sessions.resolve(A)

    def test_end_session_without_session(self, sessions):
        with pytest.raises(NotAuthenticatedError, match="Not logged in"):
            sessions.end_session(A)

    def test_identities_are_independent(self, sessions):
        sessions.start_session(A, "alice")
        sessions.start_session(B, "alice")
        sessions.end_session(A)
        assert sessions.resolve(B) == "alice"


class TestTaskStoreCreate:
    """Test id allocation"""

    def test_ids_start_at_zero_and_increase(self, store):
        ids = [store.create(A, f"t{i}", False, 0, 1) for i in range(3)]
        assert ids == [TaskId(0), TaskId(1), TaskId(2)]
        assert store.next_id == TaskId(3)

    def test_ids_not_reused_after_delete(self, store):
        store.create(A, "x", False, 0, 1)
        store.create(A, "y", False, 0, 1)
        store.delete(A, "y")
        assert store.create(A, "z", False, 0, 1) == TaskId(2)

    def test_counter_shared_across_owners(self, store):
        assert store.create(A, "x", False, 0, 1) == TaskId(0)
        assert store.create(B, "x", False, 0, 1) == TaskId(1)

    def test_invalid_due_date_does_not_consume_id(self, store):
        with pytest.raises(ValueError):
            store.create(A, "x", False, -5, 1)
        assert store.create(A, "x", False, 0, 1) == TaskId(0)

    def test_created_task_fields(self, store):
        store.create(A, "Buy milk", True, 1000, 42)
        (task,) = store.list_owned(A)
        assert task.title == "Buy milk"
        assert task.important is True
        assert task.completed is False
        assert task.due_date == 1000
        assert task.created_at == 42
        assert task.owner == A


class TestTaskStoreQueries:
    """Test owner-scoped listing"""

    def test_list_owned_filters_by_owner(self, store):
        store.create(A, "a1", False, 0, 1)
        store.create(B, "b1", False, 0, 1)
        store.create(A, "a2", False, 0, 1)

        assert [t.title for t in store.list_owned(A)] == ["a1", "a2"]
        assert [t.title for t in store.list_owned(B)] == ["b1"]
        assert store.list_owned(Identity("ccccc-cc")) == []

    def test_list_completed_owned(self, store):
        store.create(A, "a1", False, 0, 1)
        store.create(A, "a2", False, 0, 1)
        store.create(B, "a2", False, 0, 1)
        store.toggle_completed(A, "a2")

        assert [t.id.value for t in store.list_completed_owned(A)] == [1]
        assert store.list_completed_owned(B) == []

    def test_returned_tasks_are_copies(self, store):
        store.create(A, "a1", False, 0, 1)
        store.list_owned(A)[0].toggle_completed()
        assert store.list_owned(A)[0].completed is False


class TestTaskStoreMutations:
    """Test title-addressed toggle/delete"""

    def test_toggle_completed_roundtrip(self, store):
        store.create(A, "T", False, 0, 1)
        assert store.toggle_completed(A, "T").completed is True
        assert store.toggle_completed(A, "T").completed is False

    def test_toggle_important_roundtrip(self, store):
        store.create(A, "T", False, 0, 1)
        assert store.toggle_important(A, "T").important is True
        assert store.toggle_important(A, "T").important is False

    def test_duplicate_titles_affect_lowest_id(self, store):
        store.create(A, "T", False, 0, 1)
        store.create(A, "T", False, 0, 1)
        store.toggle_important(A, "T")

        flags = [(t.id.value, t.important) for t in store.list_owned(A)]
        assert flags == [(0, True), (1, False)]

    def test_delete_removes_exactly_lowest_id_match(self, store):
        store.create(A, "T", False, 0, 1)
        store.create(A, "other", False, 0, 1)
        store.create(A, "T", False, 0, 1)

        removed = store.delete(A, "T")

        assert removed.id == TaskId(0)
        assert [t.id.value for t in store.list_owned(A)] == [1, 2]

    def test_cannot_touch_other_owners_task(self, store):
        store.create(B, "T", False, 0, 1)
        with pytest.raises(TaskNotFoundError):
            store.toggle_completed(A, "T")
        with pytest.raises(TaskNotFoundError):
            store.toggle_important(A, "T")
        with pytest.raises(TaskNotFoundError):
            store.delete(A, "T")
        assert store.count() == 1
        assert store.list_owned(B)[0].completed is False

    def test_missing_title(self, store):
        with pytest.raises(TaskNotFoundError, match="Task not found"):
            store.delete(A, "nope")
