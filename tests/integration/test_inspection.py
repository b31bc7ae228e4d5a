"""
End-to-end inspection tests over real resource and source code trees
"""

import json
import os

import pytest

from i18nspector.exceptions import BaseLanguageNotFoundError, NoSourceCodeFilesError
from i18nspector.main import format_report, main
from i18nspector.services import InspectionService


def keys(resources):
    return [resource.key for resource in resources]


@pytest.fixture
def project(write_files):
    """English and Korean strings plus one source file with a broken reference"""
    return write_files({
        "locales/en.json": json.dumps({"bar": "Bar", "foo": "Foo"}),
        "locales/ko.json": json.dumps({"bar": "바"}),
        "src/app.js": "t('foo');\nt('unknown');\n",
    })


@pytest.fixture
def inspect(make_settings):
    async def run(root, **values):
        values.setdefault("resource_paths", [os.path.join(str(root), "locales")])
        values.setdefault("source_code_paths", [os.path.join(str(root), "src")])
        return await InspectionService(make_settings(**values)).inspect()
    return run


class TestInspection:
    @pytest.mark.asyncio
    async def test_full_run(self, project, inspect):
        report = await inspect(project)
        app = os.path.join(str(project), "src", "app.js")

        assert keys(report.defined_resources) == ["bar", "foo"]
        assert report.language_tags == ["en", "ko"]
        assert report.source_code_files == [app]
        assert [(u.resource.key, u.missing_language_tags) for u in report.untranslated_resources] == [("foo", ["ko"])]
        assert keys(report.orphaned_resources) == ["bar"]
        assert [(p.description, p.is_fatal) for p in report.problems] == [
            (f"Reference to unknown string 'unknown' at {app}:2", False)
        ]
        assert report.has_failures

        assert format_report(report) == [
            "",
            "🌐  Inspected 2 strings, translations in 2 languages, and references in 1 source code file.",
            "",
            "Untranslated strings:",
            "\t🟡 'foo' (ko)",
            "",
            "Orphaned strings:",
            "\t🟠 'bar'",
            "",
            "Source code problems:",
            f"\t🔴 Reference to unknown string 'unknown' at {app}:2",
        ]

    @pytest.mark.asyncio
    async def test_clean_run(self, write_files, inspect):
        root = write_files({
            "locales/en/common.json": json.dumps({"title": "Title", "item_one": "Item", "item_other": "Items"}),
            "locales/ko/common.json": json.dumps({"title": "제목", "item_other": "항목"}),
            "src/app.tsx": "export const App = () => <h1>{t('title')} {t('item')}</h1>;",
        })

        report = await inspect(root)

        assert keys(report.defined_resources) == ["title", "item"]
        assert report.untranslated_resources == []
        assert report.orphaned_resources == []
        assert report.problems == []
        assert not report.has_failures
        assert format_report(report) == [
            "",
            "🌐  Inspected 2 strings, translations in 2 languages, and references in 1 source code file.",
        ]

    @pytest.mark.asyncio
    async def test_fatal_problems_suspend_orphan_detection(self, write_files, inspect):
        root = write_files({
            "locales/en.json": json.dumps({"bar": "Bar", "foo": "Foo"}),
            "src/app.js": "t(key);\nt('foo');\n",
        })

        report = await inspect(root)
        lines = format_report(report)

        assert report.orphaned_resources == []
        assert report.orphans_unanalyzable
        assert "\t⚠️  String references cannot be analyzed until ⛔-marked source code problems are resolved." in lines
        assert "\t⛔ Non-literal of type `identifier` at " + os.path.join(str(root), "src", "app.js") + ":1" in lines

    @pytest.mark.asyncio
    async def test_fatal_problems_without_orphan_check(self, write_files, inspect):
        root = write_files({
            "locales/en.json": json.dumps({"bar": "Bar"}),
            "src/app.js": "t(key);",
        })

        report = await inspect(root, check_for_orphaned_strings=False)

        assert not report.orphans_unanalyzable
        assert "Orphaned strings:" not in format_report(report)
        assert report.has_failures

    @pytest.mark.asyncio
    async def test_ignored_and_optional_strings_are_not_orphans(self, write_files, inspect):
        root = write_files({
            "locales/en.json": '{\n  "used": "Used",\n  "spare": "Spare" // i18nspector-ignore\n}',
            "vendor/en.json": json.dumps({"library": "Library"}),
            "src/app.js": "t('used');",
        })

        report = await inspect(root, resource_paths=[
            os.path.join(str(root), "locales"), os.path.join(str(root), "vendor") + "?"
        ])

        assert keys(report.defined_resources) == ["used", "spare", "library"]
        assert report.orphaned_resources == []
        assert not report.has_failures

    @pytest.mark.asyncio
    async def test_missing_languages_follow_discovery_order(self, write_files, inspect):
        root = write_files({
            "locales/de.json": json.dumps({"a": "A"}),
            "locales/en.json": json.dumps({"a": "A", "b": "B"}),
            "locales/fr.json": json.dumps({}),
            "src/app.js": "t('a');\nt('b');",
        })

        report = await inspect(root)

        assert report.language_tags == ["de", "en", "fr"]
        assert [(u.resource.key, u.missing_language_tags) for u in report.untranslated_resources] == [
            ("a", ["fr"]),
            ("b", ["de", "fr"]),
        ]

    @pytest.mark.asyncio
    async def test_repeated_runs_give_identical_reports(self, write_files, make_settings):
        root = write_files({
            "locales/README.json": "{}",
            "locales/en/common.json": json.dumps({"title": "Title", "spare": "Spare"}),
            "locales/en/menu/items.json": json.dumps({"open": "Open", "close": "Close"}),
            "locales/ko/common.json": json.dumps({"title": "제목"}),
            "locales/de/common.json": json.dumps({"spare": "Übrig"}),
            "src/z.js": "t('zzz');",
            "src/a.js": "t('title');\nt(key);",
            "src/a/b.tsx": "export const B = () => <p>{t(open ? 'open' : 'close')}</p>;",
            "src/m/n/o.ts": "t(`missing.${name}`);\nt('unknown');",
        })
        settings = make_settings(
            resource_paths=[os.path.join(str(root), "locales")],
            source_code_paths=[os.path.join(str(root), "src")]
        )
        service = InspectionService(settings)

        first = await service.inspect()
        second = await service.inspect()
        third = await InspectionService(settings).inspect()

        assert first.has_fatal_problems
        assert len(first.problems) == 4
        assert format_report(second) == format_report(first)
        assert format_report(third) == format_report(first)

    @pytest.mark.asyncio
    async def test_checks_can_be_turned_off(self, project, inspect):
        report = await inspect(project, check_for_orphaned_strings=False, check_for_untranslated_strings=False)

        assert report.untranslated_resources == []
        assert report.orphaned_resources == []
        assert len(report.problems) == 1

    @pytest.mark.asyncio
    async def test_runs_are_independent(self, project, make_settings):
        service = InspectionService(make_settings(
            resource_paths=[os.path.join(str(project), "locales")],
            source_code_paths=[os.path.join(str(project), "src")]
        ))

        first = await service.inspect()
        second = await service.inspect()

        assert len(second.problems) == len(first.problems) == 1
        assert service.resources["foo"].references == [os.path.join(str(project), "src", "app.js") + ":1"]

    @pytest.mark.asyncio
    async def test_base_language_not_found(self, write_files, inspect):
        root = write_files({"locales/ko.json": "{}", "src/app.js": "t('a');"})

        with pytest.raises(BaseLanguageNotFoundError, match="base language tag 'en'"):
            await inspect(root)

    @pytest.mark.asyncio
    async def test_no_source_code_files(self, write_files, inspect):
        root = write_files({"locales/en.json": json.dumps({"a": "A"}), "src/app.js": "const a = 1;"})

        with pytest.raises(NoSourceCodeFilesError):
            await inspect(root)


class TestCommandLine:
    @pytest.mark.asyncio
    async def test_reports_failures(self, project, capsys):
        status = await main([
            "--resourcePaths", os.path.join(str(project), "locales"),
            "--sourceCodePaths", os.path.join(str(project), "src"),
        ])

        out = capsys.readouterr().out
        assert status == 1
        assert "\t🟠 'bar'" in out
        assert "\t🟡 'foo' (ko)" in out

    @pytest.mark.asyncio
    async def test_success(self, project, capsys):
        (project / "src" / "app.js").write_text("t('foo');\nt('bar');\n", encoding="utf-8")

        status = await main([
            "--resourcePaths", os.path.join(str(project), "locales"),
            "--sourceCodePaths", os.path.join(str(project), "src"),
            "--checkForUntranslatedStrings", "no",
        ])

        assert status == 0
        assert "Inspected 2 strings" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_paths_from_environment(self, project, monkeypatch, capsys):
        monkeypatch.setenv("I18NSPECTOR_RESOURCE_PATHS", os.path.join(str(project), "locales"))
        monkeypatch.setenv("I18NSPECTOR_SOURCE_CODE_PATHS", os.path.join(str(project), "src"))

        status = await main(["--checkForOrphanedStrings", "no"])

        assert status == 1
        assert "Orphaned strings:" not in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_help_without_paths(self, capsys):
        status = await main([])

        assert status == 1
        assert "usage: i18nspector" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_inspection_error(self, project, capsys):
        status = await main([
            "--resourcePaths", os.path.join(str(project), "locales"),
            "--sourceCodePaths", os.path.join(str(project), "src"),
            "--baseLanguage", "de",
        ])

        assert status == 1
        assert "base language tag 'de'" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_invalid_option(self, capsys):
        status = await main(["--resourcePaths", "locales", "--sourceCodePaths", "src", "--baseLanguage", "e n"])

        assert status == 1
        assert "Invalid base language tag" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_missing_path(self, project, capsys):
        missing = os.path.join(str(project), "missing")

        status = await main(["--resourcePaths", missing, "--sourceCodePaths", os.path.join(str(project), "src")])

        assert status == 1
        assert f"Cannot read {missing}: " in capsys.readouterr().err
