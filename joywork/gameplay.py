"""Game objects with unique network ids and a two-way id registry."""

from __future__ import annotations

import itertools


class GameObject:
    """A positioned object; each instance takes the next network id, from 1."""

    _ids = itertools.count(1)

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.network_id: int = next(GameObject._ids)
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"GameObject(network_id={self.network_id}, x={self.x}, y={self.y})"


class LinkingContext:
    """Maps network ids to game objects and back."""

    def __init__(self) -> None:
        self._objects: dict[int, GameObject] = {}
        self._ids: dict[GameObject, int] = {}

    def add(self, network_id: int, game_object: GameObject) -> None:
        """Link ``network_id`` and ``game_object``, replacing older links of either."""
        previous = self._objects.pop(network_id, None)
        if previous is not None:
            self._ids.pop(previous, None)
        old_id = self._ids.pop(game_object, None)
        if old_id is not None:
            self._objects.pop(old_id, None)
        self._objects[network_id] = game_object
        self._ids[game_object] = network_id

    def remove_id(self, network_id: int) -> None:
        game_object = self._objects.pop(network_id)
        del self._ids[game_object]

    def remove_object(self, game_object: GameObject) -> None:
        network_id = self._ids.pop(game_object)
        del self._objects[network_id]

    def get_object(self, network_id: int) -> GameObject:
        return self._objects[network_id]

    def get_network_id(self, game_object: GameObject) -> int:
        return self._ids[game_object]

    def __len__(self) -> int:
        return len(self._objects)