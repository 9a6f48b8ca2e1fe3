"""Adapter: convert one interface into another.

A US outlet, an EU charger and a USB-C phone each model "has power"
differently: an int, a ``"TRUE"``/``"FALSE"`` string, an enum and a bool.
"""

from enum import Enum
from typing import Protocol

from pattern_demos.patterns.registry import register


class USPlug(Protocol):
    has_power: int  # 1 means power


class EUPlug(Protocol):
    has_power: str  # "TRUE" or "FALSE"


class Power(Enum):
    TRUE = "TRUE"
    FALSE = "FALSE"


class UsbMini(Protocol):
    has_power: Power


class UsbTypeC(Protocol):
    has_power: bool


class _Plug:
    def __init__(self, has_power):
        self.has_power = has_power


def cell_phone(charge_cable: UsbTypeC) -> None:
    if charge_cable.has_power:
        print("I've Got The Power!")
    else:
        print("No power")


def us_power_outlet() -> USPlug:
    return _Plug(1)


def charger(plug: EUPlug) -> UsbMini:
    return _Plug(Power(plug.has_power))


def to_eu_plug(plug: USPlug) -> EUPlug:
    return _Plug("TRUE" if plug.has_power == 1 else "FALSE")


def to_usb_type_c(cable: UsbMini) -> UsbTypeC:
    return _Plug(cable.has_power == Power.TRUE)


@register(name="adapter", description="Chain plug and cable adapters to charge a phone")
def demo():
    try:
        # Without adapters the charger cannot read a US plug
        charger(us_power_outlet())
    except ValueError as e:
        print(f"incompatible plug: {e}")
    cell_phone(to_usb_type_c(charger(to_eu_plug(us_power_outlet()))))
