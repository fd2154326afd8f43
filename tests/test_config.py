"""
Settings from the environment
"""
import pytest

from jenkins_acceptance.config import DEFAULT_TIMEOUT_MS, Settings

VARS = ("JENKINS_URL", "ACCEPTANCE_HEADLESS", "ACCEPTANCE_TIMEOUT_MS", "ACCEPTANCE_ANIMATE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env()
    assert settings.jenkins_url == "http://localhost:8080/"
    assert settings.headless is True
    assert settings.timeout_ms == DEFAULT_TIMEOUT_MS
    assert settings.animate_actions is False


def test_overrides(monkeypatch):
    monkeypatch.setenv("JENKINS_URL", "http://ci:8080/jenkins")
    monkeypatch.setenv("ACCEPTANCE_HEADLESS", "no")
    monkeypatch.setenv("ACCEPTANCE_TIMEOUT_MS", "250")
    monkeypatch.setenv("ACCEPTANCE_ANIMATE", "Yes")
    settings = Settings.from_env()
    assert settings.jenkins_url == "http://ci:8080/jenkins/"
    assert settings.headless is False
    assert settings.timeout_ms == 250
    assert settings.animate_actions is True


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("ACCEPTANCE_TIMEOUT_MS", "soon")
    with pytest.raises(ValueError, match="ACCEPTANCE_TIMEOUT_MS"):
        Settings.from_env()
