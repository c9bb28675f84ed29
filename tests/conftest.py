import pytest

from canonical_data_syncer.args import ArgumentParser, OptionRegistry


@pytest.fixture
def parser():
    return ArgumentParser(app_name="canonical_data_syncer")


@pytest.fixture
def registry():
    return OptionRegistry()
