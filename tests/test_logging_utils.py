import logging

import pytest

import epsgeom
from epsgeom.logging_utils import ROOT_NAME, configure_logging, get_logger
from epsgeom.primitives import point, segment
from epsgeom.segment2d import intersection_point


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger(ROOT_NAME)
    handlers = list(root.handlers)
    level = root.level
    propagate = root.propagate
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    root.propagate = propagate


def test_package_installs_null_handler():
    root = logging.getLogger(ROOT_NAME)
    assert any(isinstance(h, logging.NullHandler) for h in root.handlers)


def test_get_logger_namespaces_names():
    assert get_logger('epsgeom.polygon').name == 'epsgeom.polygon'
    assert get_logger('epsgeom').name == 'epsgeom'
    assert get_logger('scratch').name == 'epsgeom.scratch'


def test_get_logger_level():
    assert get_logger('epsgeom.scratch').level == logging.NOTSET
    assert get_logger('epsgeom.scratch', level='DEBUG').level == logging.DEBUG
    assert get_logger('epsgeom.scratch').level == logging.NOTSET


def test_unknown_level_rejected(restore_root_logger):
    with pytest.raises(ValueError):
        configure_logging('LOUD')


def test_configure_logging(restore_root_logger, capsys):
    root = configure_logging('DEBUG')
    assert root is restore_root_logger
    assert root.level == logging.DEBUG
    assert not root.propagate
    assert not any(isinstance(h, logging.NullHandler) for h in root.handlers)
    ## configuring twice does not stack handlers
    configure_logging('DEBUG')
    assert len(root.handlers) == 1
    intersection_point(segment((0, 0), (1, 1)), segment((0, 1), (1, 2)))
    out = capsys.readouterr().out
    assert 'DEBUG epsgeom.segment2d: parallel lines' in out


def test_silent_by_default(capsys):
    intersection_point(segment((0, 0), (1, 1)), segment((0, 1), (1, 2)))
    assert capsys.readouterr().out == ''


def test_version():
    assert isinstance(epsgeom.__version__, str)
    assert epsgeom.point(1, 2) == point(1, 2)
