"""Shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

from ai_reviewer.config import Settings
from ai_reviewer.core.event import PullRequestContext, TriggerAction

MULTI_FILE_DIFF = """\
diff --git a/src/app.ts b/src/app.ts
index 1111111..2222222 100644
--- a/src/app.ts
+++ b/src/app.ts
@@ -1,5 +1,6 @@
 import x from "x";
-const a = 1;
+const a = 2;
+const b = 3;
 function f() {
   return a;
 }
diff --git a/src/app.test.ts b/src/app.test.ts
index 3333333..4444444 100644
--- a/src/app.test.ts
+++ b/src/app.test.ts
@@ -1,2 +1,3 @@
 describe("app", () => {
+  it("works", () => {});
 });
diff --git a/old.py b/old.py
deleted file mode 100644
index 5555555..0000000
--- a/old.py
+++ /dev/null
@@ -1,2 +0,0 @@
-print("x")
-print("y")
"""

SINGLE_HUNK_DIFF = """\
diff --git a/src/util.py b/src/util.py
index 6666666..7777777 100644
--- a/src/util.py
+++ b/src/util.py
@@ -3,4 +3,5 @@ def helper():
 a = 1
 b = 2
+c = eval(user_input)
 d = 4
 e = 5
"""


def make_settings(**overrides) -> Settings:
    """Settings with test inputs, no .env file, and the given overrides."""
    values = {
        "github_token": "ghp_test",
        "openai_api_key": "sk-test",
        "openai_api_model": "gpt-4o-mini",
        "max_tokens": 700,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def llm_returning(*contents) -> MagicMock:
    """A chat runnable whose ainvoke replies with the given texts in order."""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(side_effect=[AIMessage(content=c) for c in contents])
    return llm


@pytest.fixture
def settings() -> Settings:
    """Default test settings."""
    return make_settings()


@pytest.fixture
def pr_context() -> PullRequestContext:
    """Context of the acme/shop#7 pull request."""
    return PullRequestContext(
        owner="acme",
        repo="shop",
        pr_number=7,
        title="Add helper",
        description="Adds a helper for parsing input.",
        action=TriggerAction.OPENED,
    )
