from __future__ import annotations

import pytest

from classmonkey import (
    ActiveBinding,
    AmbiguousTargetError,
    BindingHandle,
    ConcurrentPatchError,
    ConflictPolicy,
    DuplicateMethodError,
    ImmutableAccessorError,
    ModifierEntry,
    ModifierKind,
    MonkeyError,
    Mutability,
    NoSuchMethodError,
    NotPatchedError,
    OriginalRecord,
    SlotKind,
    TargetKind,
)
from tests.sample_classes import Greeter


def greet_handle():
    return BindingHandle(TargetKind.CLASS, Greeter, "greet")


class TestEnums:

    def test_target_kind_values(self):
        assert TargetKind.CLASS.value == "class"
        assert TargetKind.INSTANCE.value == "instance"

    def test_modifier_kind_values_are_keywords(self):
        assert [k.value for k in ModifierKind] == [
            "before",
            "after",
            "around",
            "override",
            "method",
            "instance",
        ]

    def test_replacing_kinds(self):
        replacing = {
            k for k in ModifierKind if k.replaces_implementation
        }
        assert replacing == {
            ModifierKind.OVERRIDE,
            ModifierKind.NEW,
            ModifierKind.INSTANCE_REPLACE,
        }

    def test_mutability_from_string(self):
        assert Mutability("ro") == Mutability.READ_ONLY
        assert Mutability("rw") == Mutability.READ_WRITE

    def test_conflict_policy_from_string(self):
        assert ConflictPolicy("wait") == ConflictPolicy.WAIT

    def test_slot_kinds(self):
        assert SlotKind.CLASSMETHOD.value == "classmethod"


class TestRecords:

    def test_original_record_exists(self):
        handle = greet_handle()
        assert OriginalRecord(handle, Greeter.greet).exists
        assert not OriginalRecord(handle, None).exists

    def test_active_binding_kinds(self):
        binding = ActiveBinding(
            greet_handle(),
            OriginalRecord(greet_handle(), Greeter.greet),
            chain=(
                ModifierEntry(ModifierKind.BEFORE, print),
                ModifierEntry(ModifierKind.AROUND, print),
            ),
        )
        assert binding.kinds == [
            ModifierKind.BEFORE,
            ModifierKind.AROUND,
        ]
        assert binding.has_implementation

    def test_binding_without_implementation(self):
        binding = ActiveBinding(
            greet_handle(), OriginalRecord(greet_handle(), None)
        )
        assert not binding.has_implementation

        binding.chain = (ModifierEntry(ModifierKind.NEW, print),)
        assert binding.has_implementation

    def test_modifier_entry_is_frozen(self):
        entry = ModifierEntry(ModifierKind.BEFORE, print)
        with pytest.raises(AttributeError):
            entry.kind = ModifierKind.AFTER

    def test_handle_repr(self):
        assert "tests.sample_classes.Greeter.greet" in repr(
            greet_handle()
        )


class TestExceptions:

    @pytest.mark.parametrize(
        "error",
        [
            NoSuchMethodError(greet_handle()),
            DuplicateMethodError(greet_handle()),
            NotPatchedError(greet_handle()),
            ConcurrentPatchError(greet_handle()),
        ],
    )
    def test_handle_errors_carry_handle(self, error):
        assert isinstance(error, MonkeyError)
        assert error.handle == greet_handle()
        assert "tests.sample_classes.Greeter.greet" in str(error)

    def test_ambiguous_target(self):
        error = AmbiguousTargetError(42, "not a class")
        assert error.target == 42
        assert error.handle is None
        assert "not a class" in str(error)

    def test_immutable_accessor(self):
        error = ImmutableAccessorError("title", receiver="post")
        assert error.accessor_name == "title"
        assert error.receiver == "post"
        assert "read-only" in str(error)
