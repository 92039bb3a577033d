"""功能模块单元测试 — 替身注入，验证各步骤的副作用"""

from __future__ import annotations

from pathlib import Path

import pytest

from rocket.core.exceptions import ConfigError
from rocket.features import load_features
from rocket.features.database import MONGO, NONE, POSTGRES
from rocket.launcher import build_orchestrator, initial_context, launch
from rocket.orchestrator import Phase, RunContext, StepPlanBuilder

ALL_YES = {"use_git": "y", "database": "Postgres", "bootstrap": "y"}


class TestLoadFeatures:
    def test_unknown_feature(self, make_services) -> None:
        with pytest.raises(ConfigError, match="nosuch"):
            load_features(["nosuch"], StepPlanBuilder(), make_services())

    def test_module_without_register(self, make_services) -> None:
        with pytest.raises(ConfigError, match="register"):
            load_features(["rocket.orchestrator.models"], StepPlanBuilder(), make_services())

    def test_default_plan_order(self, make_services) -> None:
        orch = build_orchestrator(make_services())
        assert [s.name for s in orch.plan()] == [
            "welcome", "git.ask", "database.ask", "bootstrap.ask", "rspec.options",
            "database.clean",
            "gemfile.replace", "postgres.config", "application.config", "application.scss",
            "gemfile.bundle",
            "bootstrap.import", "rspec.install", "mongo.config",
            "configatron.install", "guard.guardfile",
            "git.commit",
        ]
        assert orch.body_for(Phase.LAUNCH).name == "gemfile.bundle"

    def test_explicit_feature_subset(self, make_services) -> None:
        orch = build_orchestrator(make_services(), ["git"])
        assert [s.name for s in orch.plan()] == ["git.ask", "git.commit"]


class TestPreflightQuestions:
    def test_answers_written_to_context(self, make_services) -> None:
        services = make_services(use_git="n", database="1", bootstrap="y")
        orch = build_orchestrator(services, ["git", "database", "bootstrap", "rspec"])
        ctx = RunContext()
        for step in orch.plan():
            if step.phase is Phase.PREFLIGHT:
                step.action(ctx)
        assert ctx["use_git"] is False
        assert ctx["database"] == MONGO
        assert ctx["skip_active_record"] is True
        assert ctx["bootstrap"] is True
        assert ctx["skip_test_unit"] is True

    def test_database_clean_removes_default_yml(self, make_services, project: Path) -> None:
        report = launch(make_services(database="Postgres"), ["database"])
        assert report.success
        assert report.context["database"] == POSTGRES
        assert not (project / "config/database.yml").exists()

    def test_database_none_keeps_default_yml(self, make_services, project: Path) -> None:
        report = launch(make_services(database=3), ["database"])
        assert report.context["database"] == NONE
        assert "skip_active_record" not in report.context
        assert (project / "config/database.yml").exists()


class TestLaunchSteps:
    def test_full_run_postgres(self, make_services, project: Path, executor, templates) -> None:
        report = launch(make_services(**ALL_YES))

        assert report.success, report.summary()
        assert executor.calls == [
            "bundle install",
            "rails generate rspec:install",
            "rails generate configatron:install",
            "git init",
            "git add .",
            "git commit -m initial commit",
        ]
        assert (project / "config/database.yml").read_text(encoding="utf-8").startswith(
            "# from https://raw.github.com/rails/rails/3-2-stable/"
        )
        assert not (project / "public/index.html").exists()
        assert not (project / "test").exists()
        assert not (project / "app/assets/stylesheets/application.css").exists()
        scss = (project / "app/assets/stylesheets/application.css.scss").read_text(encoding="utf-8")
        assert scss == '/* app */\n\n@import "bootstrap";'
        assert (project / "Guardfile").exists()
        assert (project / "spec/spec_helper.rb").exists()
        assert any(u.endswith("config/environments/test.rb.tt") for u in templates.fetched)

    def test_mongo_run(self, make_services, project: Path, executor, templates) -> None:
        helper = "http://www.railrocket.me/templates/rails/rspec/spec_helper.rb"
        templates.pages[helper] = "  config.use_transactional_fixtures = true\n"
        report = launch(make_services(use_git="n", database="Mongoid", bootstrap="n"))

        assert report.success, report.summary()
        assert "rails generate mongoid:config" in executor.calls
        assert not any(c.startswith("git") for c in executor.calls)
        assert not (project / "config/database.yml").exists()
        assert (project / "spec/spec_helper.rb").read_text(encoding="utf-8") == (
            "  # config.use_transactional_fixtures = true\n"
        )
        scss = (project / "app/assets/stylesheets/application.css.scss").read_text(encoding="utf-8")
        assert "bootstrap" not in scss

    def test_bundle_failure_halts_launch(self, make_services, project: Path, executor) -> None:
        executor.fail_on = ("bundle",)
        report = launch(make_services(**ALL_YES))

        assert not report.success
        assert report.halted_at.name == "gemfile.bundle"
        assert report.halted_at.phase is Phase.LAUNCH
        assert "bundle install失败" in report.halted_at.cause
        assert executor.calls == ["bundle install"]
        assert not (project / "Guardfile").exists()

    def test_fetch_failure_halts(self, make_services, templates, executor) -> None:
        templates.missing = ("gemfiles/gemfile",)
        report = launch(make_services(**ALL_YES))
        assert report.halted_at.name == "gemfile.replace"
        assert "404" in report.halted_at.cause
        assert executor.calls == []

    def test_invalid_answer_halts_preflight(self, make_services, executor) -> None:
        report = launch(make_services(use_git="perhaps"))
        assert report.halted_at.name == "git.ask"
        assert report.halted_at.phase is Phase.PREFLIGHT
        assert executor.calls == []


def test_initial_context(make_services) -> None:
    ctx = initial_context(make_services().config)
    assert ctx["database"] == NONE
    assert "project_dir" in ctx
