"""Fixed input/output locations for the key-code generator.

Defaults live next to the project root; each one can be overridden from the
environment (or a `.env` file at the root).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

SOURCE_FILE = Path(os.getenv("KEYCODE_SOURCE_FILE", ROOT / "uievents-code" / "index-source.txt"))
STYLE_FILE = Path(os.getenv("KEYCODE_STYLE_FILE", ROOT / ".prettierrc"))
OUTPUT_FILE = Path(os.getenv("KEYCODE_OUTPUT_FILE", ROOT / "index.d.ts"))

# Appended to every section type name; also the name of the aggregate union
TYPE_SUFFIX = "KeyCode"
AGGREGATE_TYPE_NAME = "KeyCode"
