from __future__ import annotations

import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from openai_chat.config.app_config import get_app_config
from openai_chat.config.llm_config import get_llm_config


@pytest.fixture(autouse=True)
def _fresh_config():
    get_app_config.cache_clear()
    get_llm_config.cache_clear()
    yield
    get_app_config.cache_clear()
    get_llm_config.cache_clear()
