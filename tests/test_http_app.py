from starlette.testclient import TestClient

from tools.http_app import MCP_PATH, create_http_app


def test_cors_preflight_is_answered(server):
    client = TestClient(create_http_app(server))

    response = client.options(
        MCP_PATH,
        headers={
            "Origin": "https://client.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]


def test_main_parses_transport_flags():
    from main import parse_args

    args = parse_args(["--transport", "http", "--port", "8080", "--host", "0.0.0.0"])
    assert (args.transport, args.host, args.port) == ("http", "0.0.0.0", 8080)
    assert parse_args([]).transport == "stdio"
