from __future__ import annotations


class TestCoreImports:

    def test_top_level_package(self):
        import classmonkey

        assert hasattr(classmonkey, "__version__")

    def test_public_api_exports(self):
        from classmonkey import (
            Accessor,
            ActiveBinding,
            AmbiguousTargetError,
            BindingHandle,
            ConcurrentPatchError,
            ConflictPolicy,
            DuplicateMethodError,
            ImmutableAccessorError,
            ModifierEntry,
            ModifierKind,
            MonkeyConfig,
            MonkeyError,
            MonkeyLogger,
            Mutability,
            NoSuchMethodError,
            NotPatchedError,
            OriginalRecord,
            PatchRegistry,
            SlotKind,
            TargetKind,
            TargetResolver,
            after,
            around,
            before,
            canpatch,
            configure,
            exports,
            get_logger,
            get_registry,
            has,
            instance,
            is_patched,
            load_class,
            method,
            original,
            override,
            patched_bindings,
            reset_registry,
            setup_logging,
            unpatch,
        )

    def test_all_names_resolve(self):
        import classmonkey

        for name in classmonkey.__all__:
            assert hasattr(classmonkey, name), name


class TestSubpackageImports:

    def test_registry_package(self):
        from classmonkey.registry import (
            HandleLockTable,
            MethodTable,
            OriginalStore,
            PatchRegistry,
        )

    def test_chain_package(self):
        from classmonkey.chain import (
            MODIFIER_REGISTRY,
            ModifierChain,
            get_modifier,
        )

    def test_resolution_package(self):
        from classmonkey.resolution import (
            ClassLoader,
            TargetResolver,
        )

    def test_dsl_package(self):
        from classmonkey.dsl import (
            Accessor,
            exports,
            has,
            original,
        )


class TestCLIImports:

    def test_cli_group(self):
        from classmonkey.cli import cli, main

        assert callable(main)
        assert "check" in cli.commands
        assert "info" in cli.commands
