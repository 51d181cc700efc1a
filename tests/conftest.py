import copy

import pytest

from site_metadata import SITE_METADATA


@pytest.fixture
def raw_metadata():
    return copy.deepcopy(SITE_METADATA)
