# src/md_segmenter/parsers/config.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class SegmenterConfig(BaseModel):
    # file-name suffix parsed when walking a directory, matched case-insensitively
    extension: str = Field(default=".md", pattern=r"^\.\S+$")
    # used for binary streams and local files
    encoding: str = "utf-8"
    sort_entries: bool = True
    read_size: int = Field(default=8192, gt=0)

    class Config:
        extra = "forbid"


def load_config(path: str | Path) -> SegmenterConfig:
    logger.info("Loading segmenter config from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return SegmenterConfig(**data)
