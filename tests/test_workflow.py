import io

from rich.console import Console

from showcase_publish.config import Config
from showcase_publish.console import Reporter
from showcase_publish.errors import GitError, MissingInputError, PrerequisiteError
from showcase_publish.preflight import ToolStatus
from showcase_publish.workflow import resolve_username, run_publish


def _reporter():
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None, highlight=False)
    return Reporter(console, err_console=console), buffer


def _install_fakes(monkeypatch, events, *, git=True, gh=False, gh_result=False, commit_error=None):
    def fake_check_git():
        events.append("check_git")
        return ToolStatus("git", git, "git version 2.43.0" if git else None)

    def fake_check_gh():
        events.append("check_gh")
        return ToolStatus("gh", gh, "gh version 2.40.1" if gh else None)

    def fake_init(directory, branch):
        events.append("init")
        return True

    def fake_write(directory):
        events.append("ignore")
        return True

    def fake_stage(directory):
        events.append("stage")

    def fake_commit(message, directory):
        events.append("commit")
        if commit_error is not None:
            raise commit_error

    def fake_create(repo_name, remote, directory, available):
        events.append(("create", repo_name, available))
        return gh_result

    def fake_manual(reporter, config):
        events.append(("manual", config.username, config.repo_name))

    def fake_wait(reporter):
        events.append("wait")

    def fake_hosting(reporter, config):
        events.append(("hosting", config.repo_name))

    def fake_summary(reporter, config):
        events.append("summary")

    monkeypatch.setattr("showcase_publish.workflow.check_git", fake_check_git)
    monkeypatch.setattr("showcase_publish.workflow.check_github_cli", fake_check_gh)
    monkeypatch.setattr("showcase_publish.workflow.init_repository", fake_init)
    monkeypatch.setattr("showcase_publish.workflow.write_ignore_file", fake_write)
    monkeypatch.setattr("showcase_publish.workflow.stage_all", fake_stage)
    monkeypatch.setattr("showcase_publish.workflow.create_commit", fake_commit)
    monkeypatch.setattr("showcase_publish.workflow.create_remote_repository", fake_create)
    monkeypatch.setattr("showcase_publish.workflow.render_manual_instructions", fake_manual)
    monkeypatch.setattr("showcase_publish.workflow.wait_for_keypress", fake_wait)
    monkeypatch.setattr("showcase_publish.workflow.render_hosting_instructions", fake_hosting)
    monkeypatch.setattr("showcase_publish.workflow.render_summary", fake_summary)


def test_run_publish_manual_path_when_github_cli_missing(monkeypatch):
    events = []
    _install_fakes(monkeypatch, events, gh=False)
    reporter, _ = _reporter()

    run_publish(Config(username="alice", repo_name="demo"), reporter)

    assert events == [
        "check_git",
        "check_gh",
        "init",
        "ignore",
        "stage",
        "commit",
        ("create", "demo", False),
        ("manual", "alice", "demo"),
        "wait",
        ("hosting", "demo"),
        "summary",
    ]


def test_run_publish_skips_manual_steps_after_automatic_creation(monkeypatch):
    events = []
    _install_fakes(monkeypatch, events, gh=True, gh_result=True)
    reporter, buffer = _reporter()

    run_publish(Config(username="alice", repo_name="demo"), reporter)

    assert ("create", "demo", True) in events
    assert not any(isinstance(e, tuple) and e[0] == "manual" for e in events)
    assert "wait" not in events
    assert events[-2:] == [("hosting", "demo"), "summary"]
    assert "Created https://github.com/alice/demo" in buffer.getvalue()


def test_run_publish_without_pause_skips_keypress(monkeypatch):
    events = []
    _install_fakes(monkeypatch, events, gh=True, gh_result=False)
    reporter, _ = _reporter()

    run_publish(Config(username="alice", repo_name="demo", pause=False), reporter)

    assert ("manual", "alice", "demo") in events
    assert "wait" not in events


def test_run_publish_stops_before_init_when_git_missing(monkeypatch):
    events = []
    _install_fakes(monkeypatch, events, git=False)
    reporter, buffer = _reporter()

    try:
        run_publish(Config(username="alice"), reporter)
    except PrerequisiteError:
        pass
    else:
        raise AssertionError("expected PrerequisiteError to be raised")

    assert events == ["check_git"]
    assert "https://git-scm.com/downloads" in buffer.getvalue()


def test_run_publish_commit_failure_is_fatal(monkeypatch):
    events = []
    _install_fakes(
        monkeypatch,
        events,
        commit_error=GitError("git command failed: git commit -m msg"),
    )
    reporter, buffer = _reporter()

    try:
        run_publish(Config(username="alice"), reporter)
    except GitError:
        pass
    else:
        raise AssertionError("expected GitError to be raised")

    assert events[-1] == "commit"
    assert "git config --global user.email" in buffer.getvalue()


def test_run_publish_continues_when_ignore_file_fails(monkeypatch):
    events = []
    _install_fakes(monkeypatch, events)
    monkeypatch.setattr(
        "showcase_publish.workflow.write_ignore_file",
        lambda directory: events.append("ignore") or False,
    )
    reporter, buffer = _reporter()

    run_publish(Config(username="alice", pause=False), reporter)

    assert "commit" in events
    assert events[-1] == "summary"
    assert "Could not write .gitignore" in buffer.getvalue()


def test_run_publish_help_prints_usage_only(monkeypatch):
    events = []
    _install_fakes(monkeypatch, events)
    reporter, buffer = _reporter()

    run_publish(Config(show_help=True), reporter, usage="usage: showcase-publish")

    assert events == []
    assert "usage: showcase-publish" in buffer.getvalue()


def test_resolve_username_prompts_when_missing(monkeypatch):
    monkeypatch.setattr("showcase_publish.workflow.Prompt.ask", lambda *args, **kwargs: "  bob ")
    reporter, _ = _reporter()

    assert resolve_username(Config(), reporter) == "bob"


def test_resolve_username_rejects_empty_answer(monkeypatch):
    monkeypatch.setattr("showcase_publish.workflow.Prompt.ask", lambda *args, **kwargs: "")
    reporter, _ = _reporter()

    try:
        resolve_username(Config(username=""), reporter)
    except MissingInputError as exc:
        assert "username" in str(exc)
    else:
        raise AssertionError("expected MissingInputError to be raised")
