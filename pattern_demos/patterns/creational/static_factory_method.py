"""Static factory method: construction goes through a class-level function."""

from pattern_demos.patterns.registry import register


class Server:
    """Only create servers through :meth:`get_server`."""

    _token = object()

    def __init__(self, port: int, _token=None):
        if _token is not Server._token:
            raise TypeError("use Server.get_server() to create a server")
        self.port = port
        print(f"Server started on port {port}")

    @classmethod
    def get_server(cls, port: int) -> "Server":
        return cls(port, _token=cls._token)


@register(name="static-factory-method", description="Class-level factory instead of a public constructor")
def demo():
    server = Server.get_server(8080)
    print(f"server port: {server.port}")
    try:
        Server(8080)
    except TypeError as e:
        print(f"direct construction rejected: {e}")
