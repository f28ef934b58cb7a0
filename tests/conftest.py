"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")

EXAMPLE_DOCUMENT = 'BEGIN_CODE_TABLE example "Example Codes" CODE FooBar The foo key CODE_OPT BazQux END_CODE_TABLE'

MULTI_TABLE_DOCUMENT = """\
<h3>Writing System Keys</h3>

BEGIN_CODE_TABLE writing-system-table "Alphanumeric Section - Writing System Keys"
CODE        Backquote   KEYCAP{`~} on a US keyboard.<br/>This is the
                        KEYCAP{半角/全角/漢字} key on Japanese keyboards.
CODE        Backslash   Used for both the US KEYCAP{\\|} &amp; the UK KEYCAP{#~} key.
CODE_OPT    IntlRo
END_CODE_TABLE

<h3>Function Keys</h3>

BEGIN_CODE_TABLE function-table "Function Section"
CODE        Escape      KEYCAP{Esc} or KEYCAP{&#x238B;}.
CODE        F1
CODE_OPT    Fn          PHONETIC{function} key.
END_CODE_TABLE
"""


@pytest.fixture
def example_document() -> str:
    return EXAMPLE_DOCUMENT


@pytest.fixture
def multi_table_document() -> str:
    return MULTI_TABLE_DOCUMENT
