"""Shared fixtures for daily logger tests."""

from datetime import datetime

import pytest

from daily_logger.core.types import CommitInfo


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings file at a temp dir and drop ambient API keys."""
    path = tmp_path / "settings" / "config.json"
    monkeypatch.setenv("DAILY_LOGGER_CONFIG", str(path))
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("DAILY_LOGGER_VERBOSE", raising=False)
    return path


def make_commit(hash_id, subject, author="Jane Doe", when=None):
    return CommitInfo(
        hash=hash_id,
        subject=subject,
        author=author,
        timestamp=when or datetime(2025, 1, 15, 10, 30),
    )


@pytest.fixture
def sample_commits():
    return [
        make_commit("a1b2c3d4e5f6", "feat: add daily summary command"),
        make_commit("b2c3d4e5f6a1", "fix(git): handle detached HEAD"),
        make_commit("c3d4e5f6a1b2", "refactor: split prompt builder"),
        make_commit("d4e5f6a1b2c3", "Bump version to 1.0.1"),
    ]


SAMPLE_DIFF = """diff --git a/src/app.py b/src/app.py
index 123..456 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,3 +1,4 @@
+import logging
 def main():
     pass
diff --git a/package-lock.json b/package-lock.json
index 789..abc 100644
--- a/package-lock.json
+++ b/package-lock.json
@@ -1 +1 @@
-  "version": "1.0.0"
+  "version": "1.0.1"
diff --git a/README.md b/README.md
index def..012 100644
--- a/README.md
+++ b/README.md
@@ -1 +1,2 @@
 # App
+Usage notes"""


@pytest.fixture
def sample_diff():
    return SAMPLE_DIFF
