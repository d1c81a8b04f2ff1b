"""Entry point for the asyncio based game server."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Dict, Optional, Sequence

import websockets
from websockets.asyncio.server import ServerConnection, broadcast, serve

from . import constants, protocol, utils
from .world import World


logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


class GameServer:
    """High level orchestration of the world simulation and websocket IO.

    A single game loop owns the tick for the whole process. Connections only
    register themselves in ``clients`` and feed commands into the world; all
    of it runs on one event loop so world mutations never interleave.
    """

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self.world = World()
        self.clients: Dict[int, ServerConnection] = {}
        self.ready = asyncio.Event()

    async def start(self) -> None:
        """Start the websocket server and the world update loop."""

        async with serve(self._handle_client, self.host, self.port) as server:
            self.port = server.sockets[0].getsockname()[1]
            logging.info("Server listening on ws://%s:%s", self.host, self.port)
            self.ready.set()
            await self._run_game_loop()

    async def _run_game_loop(self) -> None:
        tick_interval = constants.TICK_INTERVAL / 1000.0
        self.world.last_tick = utils.now_ms()
        while True:
            self.tick()
            await asyncio.sleep(tick_interval)

    def tick(self) -> None:
        """Advance the world once and publish the result to every client."""

        self.world.advance(utils.now_ms())
        if not self.clients:
            return
        # broadcast() never waits on a client and logs failed sends itself.
        broadcast(self.clients.values(), protocol.encode_update(self.world))

    async def _handle_client(self, websocket: ServerConnection) -> None:
        snake = self.world.add_snake()
        self.clients[snake.id] = websocket
        logging.info("Client %s connected as snake %s", websocket.remote_address, snake.id)
        try:
            async for message in websocket:
                try:
                    command = protocol.parse_client_message(message)
                except ValueError as exc:
                    logging.debug("Dropped message from snake %s: %s", snake.id, exc)
                    continue
                await self._dispatch(websocket, snake.id, command)
        except websockets.ConnectionClosed:
            logging.info("Connection of snake %s closed abnormally", snake.id)
        finally:
            self.clients.pop(snake.id, None)
            self.world.remove_snake(snake.id)
            logging.info("Snake %s disconnected", snake.id)

    async def _dispatch(
        self, websocket: ServerConnection, snake_id: int, command: protocol.ClientCommand
    ) -> None:
        if isinstance(command, protocol.StartCommand):
            self.world.rename(snake_id, command.name)
            await websocket.send(protocol.encode_init(snake_id))
        elif isinstance(command, protocol.MoveCommand):
            self.world.set_direction(command.id, command.direction)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the snake arena server")
    parser.add_argument("--host", default=constants.DEFAULT_HOST, help="Host interface to bind to")
    parser.add_argument("--port", type=int, default=constants.DEFAULT_PORT, help="Port to listen on")
    return parser.parse_args(argv)


def main() -> None:
    args = parse_args()
    server = GameServer(args.host, args.port)
    asyncio.run(server.start())


if __name__ == "__main__":
    main()
