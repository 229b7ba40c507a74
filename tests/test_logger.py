import pytest
import logging
from dataclasses import replace
import kvCalc as kc
from kvCalc.logger import makeLager


def test_set_level():
    lager = makeLager('kvCalc.test')
    lager.set_level('debug')
    assert lager.logger.level == logging.DEBUG
    lager.set_level('silent')
    assert lager.logger.level > logging.CRITICAL
    lager.set_level(logging.WARNING)
    assert lager.logger.level == logging.WARNING

    with pytest.raises(ValueError):
        lager.set_level('loud')


def test_critical_raises():
    lager = makeLager('kvCalc.test')
    lager.set_level('silent')
    with pytest.raises(RuntimeError):
        lager.critical('boom')


def test_validation_errors_are_logged(caplog):
    inputs = kc.EngineeringInput(
        fluid_type='Liquid', flow_rate=80, flow_unit='m3/h',
        inlet_pressure=0.1, outlet_pressure=0.2, pressure_unit='MPa(G)',
        temperature=40, temperature_unit='℃', density=995,
        density_unit='Kg/m3', valve_size=100, FL=0.85, rated_kv=250)

    with caplog.at_level(logging.WARNING, logger='kvCalc'):
        result = kc.calculate(inputs)

    assert result.errors
    for error in result.errors:
        assert error in caplog.text
    assert 'Liquid sizing error' in caplog.text

    # A valid call stays quiet at WARNING level
    caplog.clear()
    with caplog.at_level(logging.WARNING, logger='kvCalc'):
        kc.calculate(replace(inputs, inlet_pressure=1.5))
    assert caplog.text == ''
