"""Tests for configuration loading."""

from contributor_welcome.config import Config, get_config, set_config


class TestConfigFromEnv:
    """Tests for Config.from_env."""

    def test_defaults(self, monkeypatch):
        for name in (
            "CONTRIBUTOR_WELCOME_TOKEN",
            "GITHUB_TOKEN",
            "GITHUB_API_URL",
            "WPORG_PROFILES_URL",
            "CONTRIBUTOR_WELCOME_MAIN_BRANCH",
        ):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr("contributor_welcome.config.load_dotenv", lambda **kwargs: None)

        config = Config.from_env()

        assert config.github_token is None
        assert config.github_api_url == "https://api.github.com"
        assert config.profiles_api_url == "https://profiles.wordpress.org"
        assert config.main_branch_ref == "refs/heads/master"
        assert config.is_authenticated is False
        assert config.effective_rate_limit == 60

    def test_preferred_token(self, monkeypatch):
        monkeypatch.setenv("CONTRIBUTOR_WELCOME_TOKEN", "preferred")
        monkeypatch.setenv("GITHUB_TOKEN", "fallback")

        assert Config.from_env().github_token == "preferred"

    def test_fallback_token_and_branch(self, monkeypatch):
        monkeypatch.delenv("CONTRIBUTOR_WELCOME_TOKEN", raising=False)
        monkeypatch.setenv("GITHUB_TOKEN", "fallback")
        monkeypatch.setenv("CONTRIBUTOR_WELCOME_MAIN_BRANCH", "refs/heads/trunk")

        config = Config.from_env()

        assert config.github_token == "fallback"
        assert config.main_branch_ref == "refs/heads/trunk"
        assert config.effective_rate_limit == 5000


class TestGlobalConfig:
    """Tests for the global config accessors."""

    def test_set_and_get(self, test_config):
        assert get_config() is test_config

    def test_reset(self, test_config):
        set_config(None)
        assert get_config() is not test_config
