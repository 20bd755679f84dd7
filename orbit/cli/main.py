"""Main CLI application using Cyclopts.

Apart from ``serve``, commands are thin HTTP clients talking to the server
via the REST API.
"""

import cyclopts

from orbit.cli.commands import planets, server

app = cyclopts.App(
    name="orbit",
    help="Orbit - planet catalog sync",
)

app.command(server.app, name="serve")
app.command(planets.ingest, name="ingest")
app.command(planets.search, name="search")
app.command(planets.show, name="show")
app.command(planets.delete, name="delete")


def main() -> None:
    app()
