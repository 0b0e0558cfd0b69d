"""
Best-effort persistence for homepage card positions.

Positions are stored as one JSON object under a fixed key, mapping card id to
{"x": ..., "y": ...} percentages of the workspace:

    {"mg3_card_positions": {"blog": {"x": 12.5, "y": 40.0}}}

Losing positions is harmless, so read and write failures are logged and
otherwise ignored.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

STORAGE_KEY = "mg3_card_positions"


@dataclass(frozen=True)
class CardPosition:
    """Card offset from the workspace's top-left corner, in percent."""

    x: float
    y: float

    @classmethod
    def from_pixels(
        cls,
        left: float,
        top: float,
        workspace_width: float,
        workspace_height: float,
    ) -> "CardPosition":
        """Convert a pixel offset to percentages rounded to one decimal."""
        return cls(
            x=round(left / workspace_width * 100, 1),
            y=round(top / workspace_height * 100, 1),
        )


class CardPositionStore:
    """Card positions kept in a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> dict[str, CardPosition]:
        """Return every stored position, or an empty mapping if none can be read."""
        try:
            data = json.loads(self.path.read_text())
            stored = data.get(STORAGE_KEY, {})
            return {
                str(card_id): CardPosition(x=float(pos["x"]), y=float(pos["y"]))
                for card_id, pos in stored.items()
            }
        except FileNotFoundError:
            return {}
        except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
            logger.debug("Ignoring unreadable card positions in %s: %s", self.path, e)
            return {}

    def save(self, card_id: str, position: CardPosition) -> None:
        """Store one card's position, keeping the others."""
        positions = self.load()
        positions[str(card_id)] = position
        payload = {
            STORAGE_KEY: {
                key: {"x": pos.x, "y": pos.y} for key, pos in positions.items()
            },
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2))
        except OSError as e:
            logger.debug("Could not save card position to %s: %s", self.path, e)

    def resolve(self, card_id: str, default_x: float = 0.0, default_y: float = 0.0) -> CardPosition:
        """Stored position for a card, falling back to its layout defaults."""
        return self.load().get(str(card_id), CardPosition(x=default_x, y=default_y))
