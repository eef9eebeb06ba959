"""Tests for run(): the sequence from validation to preference write-back."""

import pytest

from fake_preference_store import FakePreferenceStore
from fake_project_creator import FakeProjectCreator
from fake_prompter import FakePrompter

from create_next_app.flags import Flags
from create_next_app.resolver import ProjectConfig
from create_next_app.runner import RunDeps, run
from create_next_app.scaffold.create_app import ScaffoldResult, ScaffoldStatus
from create_next_app.scaffold.example_source import DownloadError


def _deps(*, ci=False, answers=None, preferences=None, results=None):
    return RunDeps(
        store=FakePreferenceStore(preferences),
        prompter=FakePrompter(answers),
        creator=FakeProjectCreator(results),
        ci=ci,
    )


def _download_failure():
    return ScaffoldResult(ScaffoldStatus.DOWNLOAD_FAILED, error=DownloadError("offline"))


@pytest.mark.unit
class TestResetPreferences:

    def test_clears_and_stops(self, tmp_path):
        deps = _deps(preferences={"eslint": False})

        run(Flags(project_directory=str(tmp_path / "app"), reset_preferences=True), deps)

        assert deps.store.cleared
        assert deps.prompter.calls == []
        assert deps.creator.calls == []


@pytest.mark.unit
class TestPreferenceWriteBack:

    def test_written_after_successful_creation(self, tmp_path):
        deps = _deps(answers={"tailwind": False})

        run(Flags(project_directory=str(tmp_path / "app")), deps)

        assert deps.store.saved[-1]["tailwind"] is False

    def test_not_written_when_name_invalid(self, tmp_path):
        deps = _deps()

        with pytest.raises(SystemExit):
            run(Flags(project_directory=str(tmp_path / "Bad Name")), deps)

        assert deps.store.saved == []
        assert deps.creator.calls == []

    def test_not_written_when_destination_unsafe(self, tmp_path):
        root = tmp_path / "app"
        root.mkdir()
        (root / "index.js").write_text("")
        deps = _deps()

        with pytest.raises(SystemExit) as exc_info:
            run(Flags(project_directory=str(root)), deps)

        assert exc_info.value.code == 1
        assert deps.prompter.calls == []
        assert deps.store.saved == []

    def test_not_written_when_import_alias_malformed(self, tmp_path, capsys):
        deps = _deps()

        with pytest.raises(SystemExit) as exc_info:
            run(Flags(project_directory=str(tmp_path / "app"), import_alias="@/*x"), deps)

        assert exc_info.value.code == 1
        assert "<prefix>/*" in capsys.readouterr().err
        assert deps.creator.calls == []
        assert deps.store.saved == []


@pytest.mark.unit
class TestScaffoldOptions:

    def test_resolved_config_passed_to_creator(self, tmp_path):
        deps = _deps(ci=True, preferences={"srcDir": True})

        run(Flags(project_directory=f"  {tmp_path / 'app'}  ", package_manager="pnpm"), deps)

        options = deps.creator.calls[0]
        assert options.app_path == str(tmp_path / "app")
        assert options.package_manager == "pnpm"
        assert options.config.src_dir is True
        assert options.example is None

    def test_package_manager_detected_when_not_given(self, tmp_path, monkeypatch):
        monkeypatch.setenv("npm_config_user_agent", "yarn/1.22.19 npm/? node/v20")
        deps = _deps(ci=True)

        run(Flags(project_directory=str(tmp_path / "app")), deps)

        assert deps.creator.calls[0].package_manager == "yarn"

    def test_example_skips_toggle_questions(self, tmp_path):
        deps = _deps()

        run(Flags(project_directory=str(tmp_path / "app"), example=" with-redux "), deps)

        assert deps.prompter.calls == []
        options = deps.creator.calls[0]
        assert options.example == "with-redux"
        assert options.config == ProjectConfig()

    def test_default_example_means_builtin_template(self, tmp_path):
        deps = _deps()

        run(Flags(project_directory=str(tmp_path / "app"), example="default"), deps)

        assert deps.creator.calls[0].example is None
        assert deps.prompter.calls == []


@pytest.mark.unit
class TestDownloadFallback:

    def test_accepted_fallback_retries_without_example(self, tmp_path):
        deps = _deps(results=[_download_failure()], preferences={"eslint": False})

        run(Flags(project_directory=str(tmp_path / "app"), example="with-redux",
                  example_path="x"), deps)

        assert deps.prompter.fields == ["builtin"]
        first, second = deps.creator.calls
        assert first.example == "with-redux"
        assert second.example is None
        assert second.example_path is None
        assert deps.store.saved == [{"eslint": False}]

    def test_declined_fallback_raises_download_error(self, tmp_path):
        deps = _deps(results=[_download_failure()], answers={"builtin": False})

        with pytest.raises(DownloadError):
            run(Flags(project_directory=str(tmp_path / "app"), example="with-redux"), deps)

        assert len(deps.creator.calls) == 1
        assert deps.store.saved == []

    def test_ci_never_prompts_for_fallback(self, tmp_path):
        deps = _deps(ci=True, results=[_download_failure()])

        with pytest.raises(DownloadError):
            run(Flags(project_directory=str(tmp_path / "app"), example="with-redux"), deps)

        assert deps.prompter.calls == []


@pytest.mark.unit
class TestProjectName:

    def test_prompted_when_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        deps = _deps(answers={"path": "site"})

        run(Flags(), deps)

        assert deps.prompter.fields[0] == "path"
        assert deps.creator.calls[0].app_path == str(tmp_path / "site")

    def test_blank_answer_exits(self):
        deps = _deps(answers={"path": "   "})

        with pytest.raises(SystemExit) as exc_info:
            run(Flags(), deps)

        assert exc_info.value.code == 1
        assert deps.creator.calls == []
