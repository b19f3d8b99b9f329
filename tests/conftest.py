import pytest

from pyinifile import IniClass, IniParser


@pytest.fixture
def load():
    """Parse a text blob into a fresh `IniClass`."""
    def _load(text: str, **kwargs) -> IniClass:
        return IniParser.readlines(text.splitlines(), IniClass(**kwargs))
    return _load
