from __future__ import annotations

import pytest

import tests.sample_classes as sample_module
from classmonkey import (
    Accessor,
    DuplicateMethodError,
    ImmutableAccessorError,
    Mutability,
    NoSuchMethodError,
    exports,
    has,
    is_patched,
    unpatch,
)
from tests.sample_classes import Greeter, Post, shout_twice


def whisper(self, text):
    return text.lower()


class TestAccessors:

    def test_read_only_with_default(self):
        has(
            "tests.sample_classes.Post.title",
            is_="ro",
            default="untitled",
        )
        post = Post()

        assert post.title() == "untitled"
        with pytest.raises(ImmutableAccessorError):
            post.title("new")
        assert post.title() == "untitled"

    def test_read_write_is_per_instance(self):
        has("tests.sample_classes.Post.author", is_="rw")
        first, second = Post(), Post()

        assert first.author("ann") == "ann"
        assert first.author() == "ann"
        assert second.author() is None

    def test_values_live_in_the_instance_dict(self):
        accessor = has(
            "author", is_=Mutability.READ_WRITE, target=Post
        )
        post = Post()
        post.author("ann")

        assert vars(post)[accessor.storage_key] == "ann"

    def test_too_many_arguments(self):
        has("tests.sample_classes.Post.author", is_="rw")
        with pytest.raises(TypeError):
            Post().author("a", "b")

    def test_returns_accessor(self):
        accessor = has(
            "tests.sample_classes.Post.title", default="t"
        )
        assert isinstance(accessor, Accessor)
        assert accessor.mutability == Mutability.READ_ONLY
        assert not accessor.writable

    def test_single_object_target(self):
        post, other = Post(), Post()
        has("label", is_="rw", default="none", target=post)

        assert post.label() == "none"
        post.label("mine")
        assert post.label() == "mine"
        assert not hasattr(other, "label")

    def test_unpatch_removes_accessor(self):
        has("tests.sample_classes.Post.title")
        unpatch("title", Post)

        assert not hasattr(Post, "title")
        assert not is_patched("title", Post)

    def test_existing_method_is_rejected(self):
        with pytest.raises(DuplicateMethodError):
            has("greet", target=Greeter)
        assert Greeter().greet("x") == "Hello, x"

    def test_bad_qualified_name(self):
        with pytest.raises(ValueError):
            has("title")

    def test_bad_mutability(self):
        with pytest.raises(ValueError):
            has("tests.sample_classes.Post.title", is_="wo")


class TestExports:

    def test_export_function(self):
        handles = exports("shout_twice", Greeter, shout_twice)

        assert len(handles) == 1
        assert Greeter().shout_twice("hi") == "HI HI"

    def test_export_from_module(self):
        exports("shout_twice", Greeter, sample_module)
        assert Greeter().shout_twice("ok") == "OK OK"

    def test_export_from_mapping(self):
        exports(
            "wave", Greeter, {"wave": lambda self: "waves"}
        )
        assert Greeter().wave() == "waves"

    def test_export_to_several_targets(self):
        exports("shout_twice", [Greeter, Post], shout_twice)

        assert Post().shout_twice("a") == "A A"
        assert Greeter().shout_twice("b") == "B B"

    def test_missing_source_function(self):
        with pytest.raises(NoSuchMethodError):
            exports("wave", Greeter, {})
        assert not hasattr(Greeter, "wave")

    def test_non_callable_source_attribute(self):
        with pytest.raises(NoSuchMethodError):
            exports("prefix", Greeter, {"prefix": "text"})

    def test_existing_method_is_rejected(self):
        with pytest.raises(DuplicateMethodError):
            exports("greet", Greeter, shout_twice)

    def test_unpatch_removes_export(self):
        exports("shout_twice", Greeter, shout_twice)
        unpatch("shout_twice", Greeter)
        assert not hasattr(Greeter, "shout_twice")

    def test_source_defaults_to_calling_module(self):
        exports("whisper", Greeter)
        assert Greeter().whisper("QUIET") == "quiet"

    def test_missing_name_in_calling_module(self):
        with pytest.raises(NoSuchMethodError) as exc_info:
            exports("not_defined_here", Greeter)
        assert "test_accessors_exports" in str(exc_info.value)
