"""The playing field, its walkable connections and the character tokens on it."""

from __future__ import annotations

import threading
import weakref
from collections.abc import Iterator

from cluedo.box2d import Box2D
from cluedo.card import Character, Room
from cluedo.vector2d import Vector2D

BOARD_WIDTH = 24
BOARD_HEIGHT = 25

# One character per square, top row first.
# Room letters are listed in _ROOM_CODES.
# "." marks hallway, "#" the centre block and "x" unused squares.
_BOARD_ROWS = (
    "xxxxxxxxx.xxxx.xxxxxxxxx",
    "KKKKKKx...BBBB...xCCCCCC",
    "KKKKKK..BBBBBBBB..CCCCCC",
    "KKKKKK..BBBBBBBB..CCCCCC",
    "KKKKKK..BBBBBBBB..CCCCCC",
    "KKKKKK..BBBBBBBB...CCCCx",
    "xKKKKK..BBBBBBBB........",
    "........BBBBBBBB.......x",
    "x.................RRRRRR",
    "DDDDD.............RRRRRR",
    "DDDDDDDD..#####...RRRRRR",
    "DDDDDDDD..#####...RRRRRR",
    "DDDDDDDD..#####...RRRRRR",
    "DDDDDDDD..#####........x",
    "DDDDDDDD..#####...YYYYYx",
    "DDDDDDDD..#####..YYYYYYY",
    "x.........#####..YYYYYYY",
    ".................YYYYYYY",
    "x........HHHHHH...YYYYYx",
    "LLLLLLL..HHHHHH.........",
    "LLLLLLL..HHHHHH........x",
    "LLLLLLL..HHHHHH..SSSSSSS",
    "LLLLLLL..HHHHHH..SSSSSSS",
    "LLLLLLL..HHHHHH..SSSSSSS",
    "LLLLLLx.xxxxxxxx.xSSSSSS",
)

_ROOM_CODES = {
    "K": Room.KITCHEN,
    "D": Room.DINING_ROOM,
    "L": Room.LOUNGE,
    "B": Room.BALL_ROOM,
    "H": Room.HALL,
    "C": Room.CONSERVATORY,
    "R": Room.BILLIARD_ROOM,
    "Y": Room.LIBRARY,
    "S": Room.STUDY,
}

# (row, column, row step, column step): a hallway square and the room square it opens onto.
_DOORWAYS = (
    (7, 4, -1, 0),
    (5, 7, 0, 1),
    (5, 16, 0, -1),
    (5, 18, -1, 0),
    (8, 9, -1, 0),
    (8, 14, -1, 0),
    (12, 8, 0, -1),
    (9, 17, 0, 1),
    (13, 20, 1, 0),
    (13, 22, -1, 0),
    (16, 6, -1, 0),
    (16, 16, 0, 1),
    (17, 11, 1, 0),
    (17, 12, 1, 0),
    (18, 6, 1, 0),
    (20, 15, 0, -1),
    (20, 17, 1, 0),
)

_START_LOCATIONS = (
    (0, 9, Character.MRS_WHITE),
    (0, 14, Character.REVEREND_GREEN),
    (6, 23, Character.MRS_PEACOCK),
    (17, 0, Character.COLONEL_MUSTARD),
    (24, 7, Character.MISS_SCARLETT),
    (19, 23, Character.PROFESSOR_PLUM),
)

_TOKEN_COLORS = {
    Character.MISS_SCARLETT: (1.0, 0.0, 0.0),
    Character.COLONEL_MUSTARD: (0.0, 1.0, 1.0),
    Character.MRS_WHITE: (1.0, 1.0, 1.0),
    Character.REVEREND_GREEN: (0.0, 1.0, 0.0),
    Character.MRS_PEACOCK: (0.0, 0.0, 1.0),
    Character.PROFESSOR_PLUM: (1.0, 1.0, 0.0),
}


class Node:
    """One square of the board; it may belong to a room."""

    def __init__(self, room: Room | None = None, location: Vector2D | None = None) -> None:
        self.room = room
        self.location = location if location is not None else Vector2D()
        self._adjacent: set[Node] = set()
        self._pathways: set[Node] = set()

    def __repr__(self) -> str:
        room = self.room.name if self.room is not None else None
        return f"Node(room={room}, location=({self.location.x}, {self.location.y}))"

    def is_room(self) -> bool:
        return self.room is not None

    def adjacencies(self) -> list[Node]:
        """Return the squares that share an edge with this one."""
        return list(self._adjacent)

    def is_pathway(self, node: Node) -> bool:
        """Tell whether one may move directly from this square to the given one."""
        return node in self._pathways

    def _add_adjacency(self, node: Node) -> None:
        self._adjacent.add(node)
        node._adjacent.add(self)

    def _add_pathway(self, node: Node) -> None:
        self._pathways.add(node)
        node._pathways.add(self)


class Token:
    """A character's playing piece, moving towards the node it is assigned."""

    def __init__(self, character: Character, location: Vector2D | None = None) -> None:
        self.character = Character(character)
        self.location = location if location is not None else Vector2D()
        self.speed = 1.0
        self._node_ref: weakref.ref[Node] | None = None

    @property
    def node(self) -> Node | None:
        """The node the token heads for, or None once it is gone."""
        return self._node_ref() if self._node_ref is not None else None

    @node.setter
    def node(self, node: Node | None) -> None:
        self._node_ref = weakref.ref(node) if node is not None else None

    def animate(self, delta_time: float) -> None:
        """Move the token towards its node at its speed for the given time."""
        node = self.node
        if node is None:
            return
        vector = node.location - self.location
        length = vector.length()
        if length == 0.0:
            return
        self.location = self.location + (vector / length) * self.speed * delta_time

    def color(self) -> tuple[float, float, float]:
        """Return the token's colour as (red, green, blue) in [0, 1]."""
        return _TOKEN_COLORS.get(self.character, (0.0, 0.0, 0.0))


class BoardGraph:
    """The squares of the board, how they connect, and the tokens placed on it."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self._nodes: list[Node] = []
        self._tokens: list[Token] = []

    def is_generated(self) -> bool:
        return bool(self._nodes) and bool(self._tokens)

    def regenerate(self) -> None:
        """Rebuild all nodes, their connections and the tokens at their start squares."""
        with self.lock:
            self._tokens = []
            self._nodes = []

            grid = [
                [
                    Node(_ROOM_CODES.get(code), Vector2D(float(j), float(BOARD_HEIGHT - 1 - i)))
                    for j, code in enumerate(row)
                ]
                for i, row in enumerate(_BOARD_ROWS)
            ]
            self._nodes = [node for row in grid for node in row]

            for i, row in enumerate(grid):
                for j, node in enumerate(row):
                    for ni, nj in ((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1)):
                        if 0 <= ni < BOARD_HEIGHT and 0 <= nj < BOARD_WIDTH:
                            neighbour = grid[ni][nj]
                            node._add_adjacency(neighbour)
                            if neighbour.room == node.room:
                                node._add_pathway(neighbour)

            for i, j, di, dj in _DOORWAYS:
                hallway, room = grid[i][j], grid[i + di][j + dj]
                assert not hallway.is_room() and room.is_room()
                hallway._add_pathway(room)

            for i, j, character in _START_LOCATIONS:
                node = grid[i][j]
                assert not node.is_room()
                self._tokens.append(Token(character, node.location))

    def bounding_box(self) -> Box2D:
        box = Box2D.empty()
        for node in self._nodes:
            box.expand_to_include_point(node.location)
        return box

    def iter_nodes(self) -> Iterator[Node]:
        yield from self._nodes

    def tokens(self) -> list[Token]:
        return list(self._tokens)