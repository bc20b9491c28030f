# backend/app/pipeline/config.py

"""
Report pipeline settings.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from app.utils.config import get_env, get_env_int

logger = logging.getLogger(__name__)


class WritePolicy(str, Enum):
    """
    How Notion write failures affect a report run.

    - TOLERANT: log, list the record under ``failures`` and carry on
    - FAIL_FAST: let every item settle, then raise the first failure
    """

    TOLERANT = "tolerant"
    FAIL_FAST = "fail_fast"


@dataclass(frozen=True)
class PipelineConfig:
    write_policy: WritePolicy = WritePolicy.TOLERANT
    max_workers: int = 8


def get_pipeline_config() -> PipelineConfig:
    """
    Optional:
      - PIPELINE_WRITE_POLICY (tolerant | fail_fast, default: tolerant)
      - PIPELINE_MAX_WORKERS  (default: 8)
    """
    raw_policy = get_env("PIPELINE_WRITE_POLICY", default="tolerant", required=False)
    try:
        policy = WritePolicy(raw_policy.lower())
    except ValueError:
        logger.warning("Unknown PIPELINE_WRITE_POLICY=%r; using tolerant", raw_policy)
        policy = WritePolicy.TOLERANT

    return PipelineConfig(
        write_policy=policy,
        max_workers=max(1, get_env_int("PIPELINE_MAX_WORKERS", default=8)),
    )
