"""Prettier-compatible style options for the generated declaration file.

The options are read from the project's `.prettierrc` (JSON).  Only the
options that affect a type-alias listing are interpreted; anything else in
the file is kept on the model but has no effect.
"""

import json
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

LINE_ENDINGS = {"lf": "\n", "crlf": "\r\n", "cr": "\r", "auto": "\n"}


class StyleConfig(BaseModel):
    """Subset of prettier options, keyed by their `.prettierrc` names."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    print_width: int = Field(default=80, alias="printWidth", gt=0)
    tab_width: int = Field(default=2, alias="tabWidth", ge=0)
    use_tabs: bool = Field(default=False, alias="useTabs")
    semi: bool = True
    single_quote: bool = Field(default=False, alias="singleQuote")
    end_of_line: Literal["lf", "crlf", "cr", "auto"] = Field(default="lf", alias="endOfLine")

    @property
    def indent(self) -> str:
        return "\t" if self.use_tabs else " " * self.tab_width

    @property
    def newline(self) -> str:
        return LINE_ENDINGS[self.end_of_line]


def load_style_config(filepath: Path) -> StyleConfig:
    """Load `.prettierrc` from disk; fall back to prettier defaults when the file is missing."""
    if not filepath.exists():
        logger.warning("No style config at %s, using defaults", filepath)
        return StyleConfig()

    logger.info("Loading style config from %s", filepath)
    with open(filepath, "r", encoding="utf-8") as fopen:
        options = json.load(fopen)
    return StyleConfig.model_validate(options)
