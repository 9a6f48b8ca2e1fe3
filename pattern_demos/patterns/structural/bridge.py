"""Bridge: compose orthogonal behaviours instead of growing a subclass tree.

Also shows type aliases: ``PointsOfDamage`` and ``Meters`` are plain ``int``
under a name that says what the number means.
"""

from abc import ABC, abstractmethod

from pattern_demos.patterns.registry import register

PointsOfDamage = int
Meters = int

RIFLE_DAMAGE: PointsOfDamage = 3
REGULAR_SPEED: Meters = 1


class Trooper(ABC):
    @abstractmethod
    def move(self, x: int, y: int) -> Meters:
        ...

    @abstractmethod
    def attack_rebel(self, x: int, y: int) -> PointsOfDamage:
        ...


class Weapon(ABC):
    @abstractmethod
    def attack(self, x: int, y: int) -> PointsOfDamage:
        ...


class Legs(ABC):
    @abstractmethod
    def move(self, x: int, y: int) -> Meters:
        ...


class Shout(ABC):
    @abstractmethod
    def shout(self) -> str:
        ...


class Rifle(Weapon):
    def attack(self, x, y):
        return RIFLE_DAMAGE


class Flamethrower(Weapon):
    def attack(self, x, y):
        return RIFLE_DAMAGE * 2


class Baton(Weapon):
    def attack(self, x, y):
        return RIFLE_DAMAGE * 3


class RegularLegs(Legs):
    def move(self, x, y):
        return REGULAR_SPEED


class AthleticLegs(Legs):
    def move(self, x, y):
        return REGULAR_SPEED * 2


class MoveAlong(Shout):
    def shout(self):
        return "Move along!"


class ForTheEmpire(Shout):
    def shout(self):
        return "For the Empire!"


class StormTrooper(Trooper):
    def __init__(self, weapon: Weapon, legs: Legs, shout: Shout):
        self._weapon = weapon
        self._legs = legs
        self._shout = shout

    def move(self, x, y):
        return self._legs.move(x, y)

    def attack_rebel(self, x, y):
        return self._weapon.attack(x, y)

    def shout(self) -> str:
        return self._shout.shout()


@register(name="bridge", description="Troopers composed from weapon, legs and shout")
def demo():
    troopers = {
        "storm": StormTrooper(Rifle(), RegularLegs(), MoveAlong()),
        "flame": StormTrooper(Flamethrower(), RegularLegs(), ForTheEmpire()),
        "scout": StormTrooper(Rifle(), AthleticLegs(), ForTheEmpire()),
        "riot": StormTrooper(Baton(), RegularLegs(), MoveAlong()),
    }
    for kind, trooper in troopers.items():
        print(
            f"{kind}: moves {trooper.move(0, 0)}m, "
            f"deals {trooper.attack_rebel(0, 0)} damage, shouts {trooper.shout()!r}"
        )
