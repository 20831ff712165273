import pytest

SAMPLE = """\
[Section1]
MyIntVariable = 42
MyStringVariable = hello world
# a comment
[Section2]
AnotherIntVariable=7
"""


@pytest.fixture
def sample_ini(tmp_path):
    path = tmp_path / 'config.ini'
    path.write_text(SAMPLE, encoding='utf-8')
    return path
