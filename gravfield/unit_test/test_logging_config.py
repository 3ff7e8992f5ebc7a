import logging

import pytest

from gravfield import SphericalHarmonicsGravityField, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger('gravfield')
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_setup_logging_installs_single_handler(package_logger):
    setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1


def test_setup_logging_writes_log_file(package_logger, tmp_path):
    log_file = tmp_path / 'gravfield.log'
    setup_logging(logging.DEBUG, log_file=str(log_file))

    field = SphericalHarmonicsGravityField()
    field.set_predefined_gravity_field('earth-wgs84')
    field.set_predefined_gravity_field('mars')

    for handler in package_logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding='utf-8')
    assert 'Applied predefined spherical harmonics gravity field earth-wgs84' in text
    assert "'mars' does not exist" in text


def test_setup_logging_stops_propagation_to_root(package_logger, caplog):
    logger = setup_logging(logging.DEBUG)
    assert logger is package_logger
    assert not package_logger.propagate

    with caplog.at_level(logging.ERROR):
        SphericalHarmonicsGravityField().set_predefined_gravity_field('mars')
    assert caplog.records == []
