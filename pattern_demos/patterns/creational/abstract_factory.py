"""Abstract factory: a parser that builds a family of configuration objects.

Each property kind gets its own class, so callers get a typed ``value``
without casting from a catch-all ``object``.
"""

from dataclasses import dataclass
from typing import List

from pattern_demos.patterns.registry import register


@dataclass(frozen=True)
class Property:
    name: str
    value: object


@dataclass(frozen=True)
class IntProperty(Property):
    value: int


@dataclass(frozen=True)
class StringProperty(Property):
    value: str


@dataclass(frozen=True)
class ServerConfiguration:
    properties: List[Property]


class Parser:
    @staticmethod
    def property(prop: str) -> Property:
        name, value = prop.split(":", 1)
        if name == "port":
            return IntProperty(name, int(value.strip()))
        if name == "environment":
            return StringProperty(name, value.strip())
        raise ValueError(f"Unknown Property: {name}")

    @staticmethod
    def server(property_strings: List[str]) -> ServerConfiguration:
        return ServerConfiguration([Parser.property(p) for p in property_strings])


@register(name="abstract-factory", description="Parse typed properties into a server configuration")
def demo():
    port = Parser.property("port:8080")
    if isinstance(port, IntProperty):
        print(f"port + 1 = {port.value + 1}")
    print(Parser.property("environment:qa"))
    print(Parser.server(["port:8080", "environment:production"]))
