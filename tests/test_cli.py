from __future__ import annotations

import textwrap

from click.testing import CliRunner

from classmonkey import __version__, before, get_registry
from classmonkey.cli import cli
from tests.sample_classes import Greeter

PATCH_SCRIPT = textwrap.dedent(
    """
    from classmonkey import around, before

    before(
        "greet",
        lambda self, name: None,
        "tests.sample_classes.Greeter",
    )
    around(
        "greet",
        lambda orig, self, name: orig(self, name) + "!",
        "tests.sample_classes.Greeter",
    )
    """
)


class TestInfoCommand:

    def test_info(self):
        result = CliRunner().invoke(cli, ["info"])
        assert result.exit_code == 0
        assert "around" in result.output
        assert __version__ in result.output
        assert "fail_fast" in result.output

    def test_group_help_lists_keywords_and_targets(self):
        result = CliRunner().invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Patch keywords" in result.output
        assert "Targets" in result.output
        for keyword in ("before", "after", "around", "override"):
            assert keyword in result.output
        assert "check" in result.output

    def test_version_option(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestCheckCommand:

    def test_check_lists_patched_methods(self, tmp_path):
        script = tmp_path / "greeter_patches.py"
        script.write_text(PATCH_SCRIPT)

        result = CliRunner().invoke(cli, ["check", str(script)])

        assert result.exit_code == 0, result.output
        assert "1 method(s) patched" in result.output
        assert Greeter().greet("x") == "Hello, x!"
        assert len(get_registry()) == 1

    def test_check_failing_script(self, tmp_path):
        script = tmp_path / "broken.py"
        script.write_text("raise RuntimeError('boom')\n")

        result = CliRunner().invoke(cli, ["check", str(script)])

        assert result.exit_code == 1
        assert "Failed to load" in result.output

    def test_check_rejects_non_python_files(self, tmp_path):
        notes = tmp_path / "notes.txt"
        notes.write_text("not python")

        result = CliRunner().invoke(cli, ["check", str(notes)])

        assert result.exit_code == 1

    def test_check_missing_path(self):
        result = CliRunner().invoke(
            cli, ["check", "/no/such/patches.py"]
        )
        assert result.exit_code == 2

    def test_reapplied_patch_counts_as_patched(self, tmp_path):
        before(
            "greet",
            lambda self, name: None,
            "tests.sample_classes.Greeter",
        )
        script = tmp_path / "reapply.py"
        script.write_text(
            textwrap.dedent(
                """
                from classmonkey import before, unpatch

                unpatch("greet", "tests.sample_classes.Greeter")
                before(
                    "greet",
                    lambda self, name: None,
                    "tests.sample_classes.Greeter",
                )
                """
            )
        )

        result = CliRunner().invoke(cli, ["check", str(script)])

        assert result.exit_code == 0, result.output
        assert "1 method(s) patched" in result.output

    def test_unpatch_only_script_reports_restores(self, tmp_path):
        before(
            "greet",
            lambda self, name: None,
            "tests.sample_classes.Greeter",
        )
        script = tmp_path / "restore.py"
        script.write_text(
            "from classmonkey import unpatch\n"
            "unpatch('greet', 'tests.sample_classes.Greeter')\n"
        )

        result = CliRunner().invoke(cli, ["check", str(script)])

        assert result.exit_code == 0, result.output
        assert "0 method(s) patched" in result.output
        assert "1 method(s) restored" in result.output
        assert len(get_registry()) == 0
