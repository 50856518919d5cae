"""convlint MCPサーバーのコマンドラインエントリポイント。"""


def main() -> None:
    import uvicorn
    from starlette.middleware import Middleware

    from convlint.cli import configure_logging
    from convlint.config import LinterConfig
    from convlint.middleware import TokenAuthMiddleware
    from convlint.server import create_server

    config = LinterConfig()
    configure_logging(config.log_level)
    mcp = create_server(config)
    app = mcp.http_app(
        transport="streamable-http",
        middleware=[Middleware(TokenAuthMiddleware, url_token=config.url_token)],
    )
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
