"""Tests for the command-line interface."""

from unittest.mock import patch

import pytest

from solana_skills.cli import main


@pytest.fixture
def repo_arg(sample_repo):
    # Absolute paths resolve as local sources
    return str(sample_repo)


class TestMain:
    """Tests for the root command group."""

    def test_quick_start(self, cli_runner):
        result = cli_runner.invoke(main, [])
        assert result.exit_code == 0
        assert "Quick start" in result.output

    def test_version(self, cli_runner):
        result = cli_runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_aliases_registered(self):
        for name in ("add", "install", "find", "search", "init", "list", "ls", "remove", "rm", "cache"):
            assert name in main.commands


class TestAddCommand:
    """Tests for 'solana-skills add'."""

    def test_list_mode(self, cli_runner, repo_arg):
        result = cli_runner.invoke(main, ["add", repo_arg, "--list"])
        assert result.exit_code == 0
        assert "alpha" in result.output
        assert "beta" in result.output
        assert "[DeFi]" in result.output

    def test_missing_local_path(self, cli_runner, tmp_path):
        result = cli_runner.invoke(main, ["add", str(tmp_path / "missing"), "-y"])
        assert result.exit_code == 1
        assert "Local path does not exist" in result.output

    def test_no_skills_found(self, cli_runner, tmp_path):
        (tmp_path / "empty").mkdir()
        result = cli_runner.invoke(main, ["add", str(tmp_path / "empty"), "-y"])
        assert result.exit_code == 0
        assert "No skills found" in result.output

    def test_install_named_skill(self, cli_runner, repo_arg, project_dir):
        result = cli_runner.invoke(main, ["add", repo_arg, "-s", "ALPHA", "-a", "claude-code", "-y"])
        assert result.exit_code == 0, result.output
        dest = project_dir / ".claude" / "skills" / "alpha"
        assert dest.is_symlink()
        assert not (project_dir / ".claude" / "skills" / "beta").exists()
        assert "Installed 1 skill(s)" in result.output

    def test_install_all_to_star_agents_copy(self, cli_runner, repo_arg, project_dir):
        result = cli_runner.invoke(main, ["add", repo_arg, "-a", "*", "-m", "copy", "-y"])
        assert result.exit_code == 0, result.output
        for agent_dir in (".claude", ".cursor", ".agents", ".github"):
            skill_dir = project_dir / agent_dir / "skills" / "beta"
            assert skill_dir.is_dir() and not skill_dir.is_symlink()

    def test_no_matching_skills(self, cli_runner, repo_arg, project_dir):
        result = cli_runner.invoke(main, ["add", repo_arg, "-s", "nope", "-a", "cursor", "-y"])
        assert result.exit_code == 0
        assert "No skills found matching: nope" in result.output
        assert not (project_dir / ".cursor").exists()

    def test_no_valid_agents(self, cli_runner, repo_arg, project_dir):
        result = cli_runner.invoke(main, ["add", repo_arg, "-a", "bogus", "-y"])
        assert result.exit_code == 0
        assert "No valid agents specified" in result.output
        assert "claude-code" in result.output

    def test_all_uses_detected_agents(self, cli_runner, repo_arg, project_dir):
        from solana_skills.targets import get_agent_by_id

        with patch(
            "solana_skills.cli.add.detect_installed_agents",
            return_value=[get_agent_by_id("codex")],
        ):
            result = cli_runner.invoke(main, ["add", repo_arg, "--all"])

        assert result.exit_code == 0, result.output
        assert (project_dir / ".codex" / "skills" / "alpha").exists()
        assert (project_dir / ".codex" / "skills" / "beta").exists()

    def test_all_without_detected_agents(self, cli_runner, repo_arg, project_dir):
        with patch("solana_skills.cli.add.detect_installed_agents", return_value=[]):
            result = cli_runner.invoke(main, ["add", repo_arg, "--all"])
        assert result.exit_code == 0
        assert "No agents automatically detected" in result.output

    def test_interactive_flow(self, cli_runner, repo_arg, project_dir):
        """Skill numbers, method and confirmation are prompted for."""
        result = cli_runner.invoke(
            main, ["add", repo_arg, "-a", "cline"], input="2\ncopy\ny\n"
        )
        assert result.exit_code == 0, result.output
        dest = project_dir / ".cline" / "skills" / "beta"
        assert dest.is_dir() and not dest.is_symlink()
        assert not (project_dir / ".cline" / "skills" / "alpha").exists()

    def test_interactive_cancel(self, cli_runner, repo_arg, project_dir):
        result = cli_runner.invoke(
            main, ["add", repo_arg, "-a", "cline"], input="*\nsymlink\nn\n"
        )
        assert result.exit_code == 0
        assert "Installation cancelled" in result.output
        assert not (project_dir / ".cline").exists()

    def test_conflict_reported_as_failure(self, cli_runner, repo_arg, project_dir):
        args = ["add", repo_arg, "-s", "alpha", "-a", "roo", "-m", "symlink"]
        first = cli_runner.invoke(main, args, input="y\n")
        assert first.exit_code == 0, first.output

        second = cli_runner.invoke(main, args, input="y\n")
        assert second.exit_code == 0
        assert "1 skill(s) failed to install" in second.output

        third = cli_runner.invoke(main, args + ["-y"])
        assert third.exit_code == 0
        assert "failed to install" not in third.output

    def test_remote_source_is_fetched(self, cli_runner, sample_repo, project_dir):
        with patch("solana_skills.utils.clone_repository", return_value=sample_repo) as clone:
            result = cli_runner.invoke(main, ["add", "someone/repo@beta", "-a", "cursor", "-y"])

        assert result.exit_code == 0, result.output
        ref = clone.call_args.args[0]
        assert (ref.owner, ref.repo, ref.path) == ("someone", "repo", "skills/beta")
        assert (project_dir / ".cursor" / "skills" / "beta").exists()
        assert not (project_dir / ".cursor" / "skills" / "alpha").exists()

    def test_fetch_failure_exits_nonzero(self, cli_runner):
        from solana_skills.exceptions import FetchError

        with patch("solana_skills.utils.clone_repository", side_effect=FetchError("boom")):
            result = cli_runner.invoke(main, ["add", "someone/repo", "-y"])
        assert result.exit_code == 1
        assert "Error: boom" in result.output


class TestListCommand:
    """Tests for 'solana-skills list'."""

    def test_list_path(self, cli_runner, tmp_path, make_skill):
        make_skill(tmp_path / "installed" / "one", name="one")
        result = cli_runner.invoke(main, ["list", "-p", str(tmp_path / "installed")])
        assert result.exit_code == 0
        assert "one" in result.output
        assert "Total: 1 skill(s)" in result.output

    def test_list_empty_path(self, cli_runner, tmp_path):
        result = cli_runner.invoke(main, ["ls", "-p", str(tmp_path)])
        assert result.exit_code == 0
        assert "No skills found at specified path" in result.output

    def test_list_agent_project_skills(self, cli_runner, repo_arg, project_dir):
        cli_runner.invoke(main, ["add", repo_arg, "-a", "trae", "-y"])
        result = cli_runner.invoke(main, ["list", "-a", "trae"])
        assert result.exit_code == 0
        assert "Trae" in result.output
        assert "alpha" in result.output
        assert "beta" in result.output


class TestRemoveCommand:
    """Tests for 'solana-skills remove'."""

    def test_remove(self, cli_runner, repo_arg, project_dir, sample_repo):
        cli_runner.invoke(main, ["add", repo_arg, "-a", "kilo", "-y"])
        result = cli_runner.invoke(main, ["remove", "alpha", "-a", "kilo", "-y"])
        assert result.exit_code == 0, result.output
        assert not (project_dir / ".kilocode" / "skills" / "alpha").exists()
        assert (project_dir / ".kilocode" / "skills" / "beta").exists()
        assert (sample_repo / "skills" / "alpha" / "SKILL.md").exists()

    def test_remove_confirm_declined(self, cli_runner, repo_arg, project_dir):
        cli_runner.invoke(main, ["add", repo_arg, "-a", "kilo", "-y"])
        result = cli_runner.invoke(main, ["rm", "alpha", "-a", "kilo"], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert (project_dir / ".kilocode" / "skills" / "alpha").exists()

    def test_remove_not_installed(self, cli_runner, project_dir):
        result = cli_runner.invoke(main, ["remove", "ghost", "-a", "kilo"])
        assert result.exit_code == 0
        assert "is not installed" in result.output

    def test_remove_path_like_name(self, cli_runner, project_dir):
        victim = project_dir / "precious"
        victim.mkdir()
        (project_dir / ".kilocode" / "skills").mkdir(parents=True)

        result = cli_runner.invoke(main, ["remove", "../../precious", "-a", "kilo", "-y"])
        assert result.exit_code == 0
        assert "is not installed" in result.output
        assert victim.is_dir()


class TestInitCommand:
    """Tests for 'solana-skills init'."""

    def test_init_non_interactive(self, cli_runner, project_dir):
        result = cli_runner.invoke(
            main, ["init", "my-skill", "-y", "-d", "Does things", "--with-dirs", "docs"]
        )
        assert result.exit_code == 0, result.output
        skill_md = project_dir / "my-skill" / "SKILL.md"
        assert "name: my-skill" in skill_md.read_text()
        assert "category: General" in skill_md.read_text()
        assert (project_dir / "my-skill" / "docs" / ".gitkeep").exists()

    def test_init_interactive(self, cli_runner, project_dir):
        result = cli_runner.invoke(
            main, ["init"], input="Bad Name\ngood-name\nA description\nDeFi\nme\nexamples\n"
        )
        assert result.exit_code == 0, result.output
        content = (project_dir / "SKILL.md").read_text()
        assert "name: good-name" in content
        assert "category: DeFi" in content
        assert (project_dir / "examples" / ".gitkeep").exists()

    def test_init_existing_directory_cancelled(self, cli_runner, project_dir):
        (project_dir / "taken").mkdir()
        result = cli_runner.invoke(main, ["init", "taken", "-y"])
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert not (project_dir / "taken" / "SKILL.md").exists()


class TestFindCommand:
    """Tests for 'solana-skills find'."""

    def test_find_query(self, cli_runner, sample_repo):
        with patch("solana_skills.cli.find.clone_repository", return_value=sample_repo):
            result = cli_runner.invoke(main, ["find", "jupiter"])
        assert result.exit_code == 0, result.output
        assert "alpha" in result.output
        assert "DeFi" in result.output
        assert "beta" not in result.output

    def test_find_list(self, cli_runner, sample_repo):
        with patch("solana_skills.cli.find.clone_repository", return_value=sample_repo):
            result = cli_runner.invoke(main, ["search", "-l"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "alpha" in lines
        assert "beta" in lines
        assert "Found" not in result.output

    def test_find_no_match(self, cli_runner, sample_repo):
        with patch("solana_skills.cli.find.clone_repository", return_value=sample_repo):
            result = cli_runner.invoke(main, ["find", "zzz"])
        assert result.exit_code == 0
        assert "No skills found matching" in result.output


class TestCacheCommand:
    """Tests for 'solana-skills cache'."""

    def test_clear(self, cli_runner, cache_dir, monkeypatch):
        monkeypatch.setattr("solana_skills.config.CACHE_DIR", cache_dir)
        (cache_dir / "a-b").mkdir(parents=True)

        result = cli_runner.invoke(main, ["cache", "clear"])
        assert result.exit_code == 0
        assert not cache_dir.exists()

        result = cli_runner.invoke(main, ["cache", "clear"])
        assert "already empty" in result.output
