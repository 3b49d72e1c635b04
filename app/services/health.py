# app/services/health.py
from __future__ import annotations

from typing import Any, Dict

from app.core import config


def version_payload() -> Dict[str, Any]:
    return {
        "version": config.APP_VERSION,
        "git_sha": config.GIT_SHA,
        "build_date": config.BUILD_DATE,
    }
