"""Server command."""

import cyclopts
import logfire
import uvicorn

app = cyclopts.App(name="serve", help="Run the API server")


@app.default
def serve(
    host: str = "127.0.0.1",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """Run the Orbit API server in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart on code changes (development).
    """
    # Spans are exported only when LOGFIRE_TOKEN is set
    logfire.configure(send_to_logfire="if-token-present", console=False)
    uvicorn.run(
        "orbit.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )
