import pytest
from pattern_demos.patterns.registry import get_registry
from pattern_demos.patterns.creational import singleton
from pattern_demos.patterns.creational.static_factory_method import Server
from pattern_demos.patterns.creational.factory_method import Pawn, Queen, create_piece
from pattern_demos.patterns.creational.abstract_factory import (
    IntProperty,
    Parser,
    StringProperty,
)
from pattern_demos.patterns.creational.builder import DefaultsMail, MailBuilder
from pattern_demos.patterns.creational.prototype import Role, User, create_user
from pattern_demos.runner.execute import run_example

CATALOG = [
    "singleton",
    "static-factory-method",
    "factory-method",
    "abstract-factory",
    "builder",
    "prototype",
    "adapter",
    "bridge",
    "decorator",
    "operator-overloading",
]


class TestCatalogRegistration:
    def test_catalog_registered_in_order(self):
        names = get_registry().names()
        assert [n for n in names if n in CATALOG] == CATALOG

    def test_every_example_has_description(self):
        for name in CATALOG:
            assert get_registry().get(name).description

    @pytest.mark.parametrize("name", CATALOG)
    def test_every_example_succeeds(self, name):
        result = run_example(get_registry().get(name))

        assert result.succeeded, result.output.error
        assert result.output.lines


class TestSingleton:
    def test_init_runs_once(self, monkeypatch):
        monkeypatch.setattr(singleton, "_instance", None)

        result = run_example(get_registry().get("singleton"))

        assert result.output.lines == [
            "I was accessed for the 1st time",
            "same instance: True",
            "size: 0",
            "contains 'anything': False",
        ]

    def test_unimplemented_methods(self, monkeypatch):
        monkeypatch.setattr(singleton, "_instance", None)
        catalog = singleton.get_catalog()

        assert singleton.get_catalog() is catalog
        with pytest.raises(NotImplementedError):
            catalog[0]


class TestStaticFactoryMethod:
    def test_get_server(self, capsys):
        server = Server.get_server(9090)

        assert server.port == 9090
        assert capsys.readouterr().out == "Server started on port 9090\n"

    def test_direct_construction_rejected(self):
        with pytest.raises(TypeError):
            Server(8080)


class TestFactoryMethod:
    def test_known_ranks(self):
        assert create_piece("q") == Queen("q")
        assert create_piece("p") == Pawn("p")

    def test_unknown_rank(self):
        with pytest.raises(ValueError, match="Unknown piece: k"):
            create_piece("k")


class TestAbstractFactory:
    def test_property_types(self):
        port = Parser.property("port:8080")
        env = Parser.property("environment: qa")

        assert isinstance(port, IntProperty)
        assert port.value == 8080
        assert isinstance(env, StringProperty)
        assert env.value == "qa"

    def test_unknown_property(self):
        with pytest.raises(ValueError, match="Unknown Property: host"):
            Parser.property("host:localhost")

    def test_server(self):
        config = Parser.server(["port:8080", "environment:production"])

        assert [p.name for p in config.properties] == ["port", "environment"]


class TestBuilder:
    def test_builder(self):
        mail = MailBuilder(["a@b.c"]).title("t").cc(["d@e.f"]).important(True).build()

        assert mail.to == ["a@b.c"]
        assert mail.cc == ["d@e.f"]
        assert mail.title == "t"
        assert mail.important is True

    def test_builder_requires_recipient(self):
        with pytest.raises(ValueError, match="To property is empty"):
            MailBuilder().build()

    def test_defaults(self):
        mail = DefaultsMail(to=[], important=True)

        assert mail.cc == []
        assert mail.title == ""
        assert mail.important is True


class TestPrototype:
    def test_create_user_copies_template(self):
        users = [User("root", Role.ADMIN, frozenset({"write"}), "ops")]

        create_user(users, "bob", Role.ADMIN)

        assert users[1].name == "bob"
        assert users[1].has_permission("write")
        assert users[1].task == "Wash dishes"

    def test_create_user_without_template(self):
        users = [User("root", Role.ADMIN, frozenset(), "ops")]

        create_user(users, "nobody", Role.REGULAR_USER)

        assert len(users) == 1
