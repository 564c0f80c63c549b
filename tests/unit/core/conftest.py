"""Shared fixtures for core unit tests"""

import pytest

from mdblocks.core.parse import parse_markdown


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("hello")
```

> **note**: Remember this

| a | b |
|---|---|
| 1 | 2 |

![diagram](diagram.png)

---

Footer paragraph.
"""


@pytest.fixture(name="parse")
def parse_fixture():
    """Return a helper that parses markdown into a markdown-it syntax tree."""
    return parse_markdown


@pytest.fixture(name="first_inline")
def first_inline_fixture():
    """Return a helper yielding the inline node of the first top-level block."""
    def _first_inline(md: str):
        return parse_markdown(md).children[0].children[0]
    return _first_inline


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
