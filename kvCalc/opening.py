import numpy as np
from .constants import OPENING_LOW, OPENING_HIGH
from .datatypes import FlowCharacteristic


def equal_percentage_opening(m, R):
    """Travel (%) of an equal percentage trim for m = rated/required Kv."""
    if m <= 0 or R <= 1:
        return np.nan
    return (1 - np.log10(m)/np.log10(R))*100


def linear_opening(m, R):
    if m <= 0 or R <= 1:
        return np.nan
    return (R - m)/((R - 1)*m)*100


def quick_opening_opening(m, R):
    if m <= 1 or R <= 1:
        return np.nan
    inner = R*(m - 1)/((R - 1)*m)
    return (1 - np.sqrt(inner))*100


_OPENING_CURVES = {
    FlowCharacteristic.EQUAL_PERCENTAGE: equal_percentage_opening,
    FlowCharacteristic.LINEAR: linear_opening,
    FlowCharacteristic.QUICK_OPENING: quick_opening_opening,
}


def valve_opening(kv, rated_kv, R, characteristic):
    """
    Valve travel needed to pass the required Kv.

    Args:
        kv (float): Required (calculated) Kv.
        rated_kv (float): Rated Kv at full travel.
        R (float): Inherent rangeability.
        characteristic (FlowCharacteristic or str): Trim characteristic.

    Returns:
        float: Opening in percent, NaN when the curve is undefined.

    Raises:
        ValueError: For an unknown flow characteristic.
    """
    curve = _OPENING_CURVES[FlowCharacteristic(characteristic)]
    if kv == 0:
        return np.nan
    return curve(rated_kv/kv, R)


def kv_at_opening(opening, rated_kv, R, characteristic):
    """
    Closed-form inverse of valve_opening.

    Args:
        opening (float): Travel in percent.
        rated_kv (float): Rated Kv at full travel.
        R (float): Inherent rangeability.
        characteristic (FlowCharacteristic or str): Trim characteristic.

    Returns:
        float: Kv delivered at the given travel.
    """
    characteristic = FlowCharacteristic(characteristic)
    if R <= 1:
        return np.nan

    h = opening/100
    if characteristic is FlowCharacteristic.EQUAL_PERCENTAGE:
        return rated_kv/R**(1 - h)
    elif characteristic is FlowCharacteristic.LINEAR:
        return rated_kv*(1 + h*(R - 1))/R
    else:
        s = (1 - h)**2*(R - 1)/R
        m = 1/(1 - s)
        return rated_kv/m


def validate_opening(opening):
    """
    Check a computed travel.

    Returns:
        tuple: (valid, message). message is None when the travel sits
        inside the 10-90 % band. Out-of-band travel within 0-100 % is
        valid but advisory.
    """
    if np.isnan(opening):
        return False, 'Valve opening could not be calculated'
    if opening < 0:
        return False, (f"Valve opening {opening:.1f}% is below 0%, "
                       "the valve is oversized")
    if opening > 100:
        return False, (f"Valve opening {opening:.1f}% exceeds 100%, "
                       "the valve is undersized")
    if opening < OPENING_LOW:
        return True, (f"Valve opening {opening:.1f}% is below "
                      f"{OPENING_LOW:.0f}%, consider a smaller valve")
    if opening > OPENING_HIGH:
        return True, (f"Valve opening {opening:.1f}% is above "
                      f"{OPENING_HIGH:.0f}%, consider a larger valve")
    return True, None
