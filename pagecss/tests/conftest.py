"""Pytest configuration for pagecss tests."""

import logging
import pytest

from ..core.host import MemoryHost
from ..core.pipeline import PageCSSPipeline
from ..managers.memory import MemoryFragmentStore, MemoryMetadataStore
from ..utils.config import Settings

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

@pytest.fixture
def host():
    """Return an empty in-memory wiki."""
    return MemoryHost()

@pytest.fixture
def metadata_store():
    return MemoryMetadataStore()

@pytest.fixture
def fragment_store():
    return MemoryFragmentStore()

@pytest.fixture
def make_pipeline(host, metadata_store, fragment_store):
    """Return a factory building pipelines over the shared in-memory stores."""
    def factory(**settings):
        return PageCSSPipeline(host, metadata_store, fragment_store, Settings(**settings))
    return factory

@pytest.fixture
def pipeline(make_pipeline):
    return make_pipeline()

@pytest.fixture(scope='session')
def sample_page():
    """Return page source with page and namespace CSS blocks."""
    return """
====== Release notes ======

<css>
.note {
    color: #333;
    font-weight: bold;
}
</css>

Some text.

<nscss>
.banner { background-color: #f5f5f5; }
</nscss>

<pagecss>
#content > .box { padding: 10px; }
</pagecss>
"""

@pytest.fixture(scope='session')
def dangerous_css():
    """Return CSS snippets that must be rejected outright."""
    return [
        "div{behavior:url(x.htc)}",
        "p{width:expression(alert(1))}",
        "p{width:EXPRESSION (alert(1))}",
        "p{background:url(javascript:alert(1))}",
        "p{background:url('javascript:alert(1)')}",
        "p{-moz-binding:url(http://example.com/x.xml#y)}",
        "p{background:url(data:text/html;base64,PHNjcmlwdD4=)}",
        "@import url(http://example.com/evil.css); p{color:red}",
        "@font-face{font-family:x;unicode-range:U+0000-00FF}",
        r"p{width:expr\65ssion(alert(1))}",
    ]
