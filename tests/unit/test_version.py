"""tests/unit/test_version.py"""

import ddnsurl


def test_version():
    """Verify that the version string is present and valid."""
    assert isinstance(ddnsurl.__version__, str)
    assert len(ddnsurl.__version__) > 0
    # Basic semver-ish check
    assert ddnsurl.__version__.count(".") >= 1
