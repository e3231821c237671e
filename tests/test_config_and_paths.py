"""Tests for Config hierarchy, Settings and paths module"""
import pytest
import yaml
from semv.config import Config, Settings
from semv.errors import ConfigError
from semv.paths import find_repo_root, get_repo_config_path


class TestRepoRootFinder:
    """Test find_repo_root() function"""

    def test_find_repo_root_in_repo_root(self, git_repo):
        """Test finding repo root when at the root"""
        assert find_repo_root(git_repo) == git_repo.resolve()

    def test_find_repo_root_from_subdirectory(self, git_repo):
        """Test finding repo root from a subdirectory"""
        subdir = git_repo / "src" / "foo" / "bar"
        subdir.mkdir(parents=True)

        assert find_repo_root(subdir) == git_repo.resolve()

    def test_find_repo_root_git_file(self, temp_dir):
        """Test a .git file (worktree or submodule) marks the root"""
        (temp_dir / ".git").write_text("gitdir: /elsewhere/.git/worktrees/x\n")

        assert find_repo_root(temp_dir) == temp_dir.resolve()

    def test_find_repo_root_outside_repo(self, temp_dir):
        """Test when not in a git repository"""
        assert find_repo_root(temp_dir) is None

    def test_get_repo_config_path(self, git_repo):
        """Test getting repo config path"""
        assert get_repo_config_path(git_repo) == git_repo.resolve() / ".semv.yaml"

    def test_get_repo_config_path_outside_repo(self, temp_dir):
        """Test no config path outside a repository"""
        assert get_repo_config_path(temp_dir) is None


class TestConfigHierarchy:
    """Test Config with hierarchical lookup"""

    def _write(self, path, data):
        path.write_text(yaml.safe_dump(data))
        return path

    def test_config_reads_single_file(self, temp_dir):
        """Test config reads values from its file"""
        path = self._write(temp_dir / "global.yaml", {"repository": "owner/repo", "prefix": "release-"})

        config = Config(config_path=path, enable_hierarchy=False)
        assert config.repository == "owner/repo"
        assert config.prefix == "release-"

    def test_local_overrides_global(self, temp_dir):
        """Test that local config values override global"""
        global_path = self._write(temp_dir / "global.yaml", {
            "repository": "owner/global",
            "api_url": "https://ghe.example.com/api/v3",
        })
        local_path = self._write(temp_dir / "local.yaml", {"repository": "owner/local"})

        config = Config(config_path=local_path, enable_hierarchy=True, global_config_path=global_path)

        assert config.repository == "owner/local"
        assert config.api_url == "https://ghe.example.com/api/v3"

    def test_defaults(self, temp_dir):
        """Test defaults when no file exists"""
        config = Config(config_path=temp_dir / "missing.yaml", enable_hierarchy=False)

        assert config.repository is None
        assert config.prefix == "v"
        assert config.pre_name == ""
        assert config.build_name == ""

    def test_empty_prefix_is_kept(self, temp_dir):
        """Test an explicit empty prefix is not replaced by the default"""
        path = self._write(temp_dir / "c.yaml", {"prefix": ""})
        assert Config(config_path=path, enable_hierarchy=False).prefix == ""

    def test_token_from_environment(self, temp_dir, monkeypatch):
        """Test GITHUB_TOKEN is used when no token is configured"""
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        config = Config(config_path=temp_dir / "missing.yaml", enable_hierarchy=False)
        assert config.github_token == "env-token"

        path = self._write(temp_dir / "c.yaml", {"github_token": "file-token"})
        assert Config(config_path=path, enable_hierarchy=False).github_token == "file-token"

    def test_invalid_yaml(self, temp_dir):
        """Test unreadable YAML raises ConfigError"""
        path = temp_dir / "bad.yaml"
        path.write_text("repository: [unclosed\n")
        with pytest.raises(ConfigError, match="Failed to load config"):
            Config(config_path=path, enable_hierarchy=False)

    def test_non_mapping(self, temp_dir):
        """Test a YAML list is rejected"""
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            Config(config_path=path, enable_hierarchy=False)

    def test_broken_global_ignored(self, temp_dir):
        """Test a broken global config does not block the local one"""
        global_path = temp_dir / "global.yaml"
        global_path.write_text("{{{")
        local_path = self._write(temp_dir / "local.yaml", {"repository": "owner/local"})

        config = Config(config_path=local_path, enable_hierarchy=True, global_config_path=global_path)
        assert config.repository == "owner/local"

    def test_load_with_repo_context(self, git_repo):
        """Test the repo-local file is picked up inside a repository"""
        self._write(git_repo / ".semv.yaml", {"repository": "owner/repo"})

        config = Config.load_with_repo_context(git_repo)
        assert config.config_path == git_repo.resolve() / ".semv.yaml"
        assert config.repository == "owner/repo"


class TestSettings:
    """Test Settings resolution"""

    def test_options_override_config(self, temp_dir):
        """Test command-line values win over config values"""
        path = temp_dir / "c.yaml"
        path.write_text(yaml.safe_dump({"repository": "owner/config", "prefix": "x", "pre_name": "beta"}))
        config = Config(config_path=path, enable_hierarchy=False)

        settings = Settings.resolve(config, repository="owner/cli", prefix=None, pre=True)

        assert settings.repository == "owner/cli"
        assert settings.prefix == "x"
        assert settings.pre_name == "beta"
        assert settings.pre is True

    def test_without_config(self):
        """Test defaults with no config at all"""
        settings = Settings.resolve(None)
        assert settings == Settings()
        assert settings.prefix == "v"

    def test_option_names_switch_annotations_on(self):
        """Test a name given as an option implies the matching toggle"""
        settings = Settings.resolve(None, pre_name="beta", build_name="ci")
        assert settings.wants_pre_release
        assert settings.wants_build
        assert not Settings().wants_pre_release
        assert not Settings().wants_build

    def test_config_names_do_not_switch_annotations_on(self, temp_dir):
        """Test names from config are only defaults"""
        path = temp_dir / "c.yaml"
        path.write_text(yaml.safe_dump({"pre_name": "beta", "build_name": "ci"}))
        config = Config(config_path=path, enable_hierarchy=False)

        settings = Settings.resolve(config, pre=False, build=False)
        assert not settings.wants_pre_release
        assert not settings.wants_build
        assert Settings.resolve(config, pre=True).pre_name == "beta"

    def test_immutable(self):
        """Test Settings cannot be changed after creation"""
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.prefix = "x"
