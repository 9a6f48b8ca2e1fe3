"""Builder: three ways to construct an object with many optional fields."""

from dataclasses import dataclass, field
from typing import List, Optional

from pattern_demos.patterns.registry import register


@dataclass(frozen=True)
class Mail:
    to: List[str]
    cc: List[str]
    title: str
    message: str
    important: bool


class MailBuilder:
    """Classic builder: chained setters, validation in :meth:`build`."""

    def __init__(self, to: Optional[List[str]] = None):
        self._to = list(to or [])
        self._cc: List[str] = []
        self._title = ""
        self._message = ""
        self._important = False

    def to(self, to: List[str]) -> "MailBuilder":
        self._to = list(to)
        return self

    def cc(self, cc: List[str]) -> "MailBuilder":
        self._cc = list(cc)
        return self

    def title(self, title: str) -> "MailBuilder":
        self._title = title
        return self

    def message(self, message: str) -> "MailBuilder":
        self._message = message
        return self

    def important(self, important: bool) -> "MailBuilder":
        self._important = important
        return self

    def build(self) -> Mail:
        if not self._to:
            raise ValueError("To property is empty")
        return Mail(self._to, self._cc, self._title, self._message, self._important)


class FluentMail:
    """Fluent setters on the object itself; optional fields stay mutable."""

    def __init__(self, to: List[str]):
        self.to = to
        self._message: Optional[str] = None
        self._cc: Optional[List[str]] = None
        self._title: Optional[str] = None
        self._important: Optional[bool] = None

    def message(self, message: str) -> "FluentMail":
        self._message = message
        return self

    def cc(self, cc: List[str]) -> "FluentMail":
        self._cc = cc
        return self

    def title(self, title: str) -> "FluentMail":
        self._title = title
        return self

    def important(self, important: bool) -> "FluentMail":
        self._important = important
        return self

    def __repr__(self) -> str:
        return (
            f"FluentMail(to={self.to!r}, message={self._message!r}, cc={self._cc!r}, "
            f"title={self._title!r}, important={self._important!r})"
        )


@dataclass(frozen=True)
class DefaultsMail:
    """Default values plus keyword arguments; usually all you need."""

    to: List[str]
    cc: List[str] = field(default_factory=list)
    title: str = ""
    message: str = ""
    important: bool = False


@register(name="builder", description="Builder, fluent setters and keyword defaults for a mail object")
def demo():
    print(MailBuilder(["hello@hello.com"]).title("What's up?").build())
    print(FluentMail(["manager@company.com"]).message("Ping"))
    print(FluentMail(["manager@company.com", "team@company.com"]).message("Something").title("Apply"))
    print(DefaultsMail(["manager@company.com"], title="Ping"))
    print(DefaultsMail(to=[], important=True))
    try:
        MailBuilder().title("nobody").build()
    except ValueError as e:
        print(f"build rejected: {e}")
