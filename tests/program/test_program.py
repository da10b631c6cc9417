import pytest

from intcode.common.errors import ProgramLoadError
from intcode.runtime.program import load, load_file


def test_load_trims_whitespace():
    assert load('  1,-2,+3,99\n') == (1, -2, 3, 99)


def test_load_large_literal():
    assert load('104,1125899906842624,99') == (104, 1125899906842624, 99)


@pytest.mark.parametrize('text', ['', '1,,2', '1,a,3', '1.5,2', '1,2,', 'x'])
def test_malformed(text):
    with pytest.raises(ProgramLoadError):
        load(text)


def test_load_file(tmp_path):
    path = tmp_path / 'input'
    path.write_text('1,0,0,0,99\n')

    assert load_file(path) == (1, 0, 0, 0, 99)
    assert load_file(str(path)) == (1, 0, 0, 0, 99)
