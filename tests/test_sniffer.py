"""
Tests for container format detection.
"""

import struct

import pytest

from cclevels.constants import LevelsetMagic
from cclevels.levels import Levelset, LevelsetFormat, classify


@pytest.mark.parametrize("magic", list(LevelsetMagic))
def test_recognized_magics(tmp_path, magic):
    path = tmp_path / "levels.dat"
    path.write_bytes(struct.pack('<I', magic))

    assert classify(path) == LevelsetFormat.RECOGNIZED_CONTAINER


def test_saved_levelset_is_recognized(tmp_path):
    path = tmp_path / "levels.dat"
    Levelset(2, magic=LevelsetMagic.LYNX).save(path)

    assert classify(str(path)) == LevelsetFormat.RECOGNIZED_CONTAINER


def test_unknown_magic_is_alternate_format(tmp_path):
    path = tmp_path / "levels.dac"
    path.write_bytes(b'file=CHIPS.DAT\n')

    assert classify(path) == LevelsetFormat.ALTERNATE_CONTAINER


def test_short_file_is_error(tmp_path):
    path = tmp_path / "short.dat"
    path.write_bytes(b'\xAC\xAA\x02')

    assert classify(path) == LevelsetFormat.ERROR


def test_missing_file_is_error(tmp_path):
    assert classify(tmp_path / "missing.dat") == LevelsetFormat.ERROR
