"""Operator overloading: indexed access through __getitem__ and __setitem__."""

from typing import Dict

from pattern_demos.patterns.registry import register


class StarshipRegistry:
    def __init__(self):
        self._captains: Dict[str, str] = {"USS Enterprise": "Jean-Luc Picard"}

    def __getitem__(self, starship_name: str) -> str:
        return self._captains.get(starship_name, "Unknown")

    def __setitem__(self, starship_name: str, captain_name: str) -> None:
        self._captains[starship_name] = captain_name


@register(name="operator-overloading", description="Square-bracket access on a custom class")
def demo():
    ships = StarshipRegistry()
    print(ships["USS Enterprise"])
    ships["USS Voyager"] = "Kathryn Janeway"
    print(ships["USS Voyager"])
    print(ships["USS Defiant"])
    print(f"1 + 1 = {1 + 1}, '1' + '1' = {'1' + '1'}, ['a'] + ['b'] = {['a'] + ['b']}")
