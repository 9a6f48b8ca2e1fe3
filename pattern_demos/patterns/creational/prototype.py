"""Prototype: derive new objects by copying an existing one."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import FrozenSet, List

from pattern_demos.patterns.registry import register


class Role(Enum):
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"
    REGULAR_USER = "REGULAR_USER"


@dataclass(frozen=True)
class User:
    name: str
    role: Role
    permissions: FrozenSet[str]
    task: str

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


def create_user_by_hand(users: List[User], name: str, role: Role) -> None:
    # Every new User field has to be threaded through here as well
    for u in users:
        if u.role == role:
            users.append(User(name, role, u.permissions, "Do the laundry"))
            return


def create_user(users: List[User], name: str, role: Role) -> None:
    for u in users:
        if u.role == role:
            users.append(replace(u, name=name, task="Wash dishes"))
            return


@register(name="prototype", description="Clone an existing user instead of rebuilding it field by field")
def demo():
    users = [User("root", Role.ADMIN, frozenset({"read", "write"}), "Keep the lights on")]
    create_user_by_hand(users, "alice", Role.ADMIN)
    create_user(users, "bob", Role.ADMIN)
    create_user(users, "nobody", Role.REGULAR_USER)
    for user in users:
        print(f"{user.name}: {user.role.value} can write={user.has_permission('write')} task={user.task}")
