"""Configuration loader for card notations."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

SUIT_POSITIONS = ("first", "last")


@dataclass
class NotationConfig:
    """Configuration for a card notation (rank and suit alphabets)."""

    id: str
    name: str
    description: str
    suit_position: str  # "first" or "last"
    ranks: dict[str, str]  # symbol -> Rank member name
    suits: dict[str, str]  # symbol -> Suit member name
    case_sensitive: bool = False
    _rank_lookup: dict[str, str] = field(init=False, repr=False)
    _suit_lookup: dict[str, str] = field(init=False, repr=False)

    def __post_init__(self):
        if self.suit_position not in SUIT_POSITIONS:
            raise ValueError(f"Invalid suit_position for notation {self.id}: {self.suit_position}")
        self._rank_lookup = {self._normalize(s): name for s, name in self.ranks.items()}
        self._suit_lookup = {self._normalize(s): name for s, name in self.suits.items()}

    def _normalize(self, symbol: str) -> str:
        return symbol if self.case_sensitive else symbol.casefold()

    def split_card(self, card_str: str) -> tuple[str, str]:
        """
        Split card text into (rank member name, suit member name).

        Suit symbols are a single character; the rank takes the rest of the
        text, so multi-character ranks such as '10' are supported.

        Raises:
            ValueError: If the text is too short or a symbol is unknown
        """
        card_str = card_str.strip()
        if len(card_str) < 2:
            raise ValueError(f"Invalid card string: {card_str!r}")

        if self.suit_position == "first":
            suit_symbol, rank_symbol = card_str[0], card_str[1:]
        else:
            rank_symbol, suit_symbol = card_str[:-1], card_str[-1]

        rank_name = self._rank_lookup.get(self._normalize(rank_symbol))
        suit_name = self._suit_lookup.get(self._normalize(suit_symbol))
        if rank_name is None or suit_name is None:
            raise ValueError(f"Invalid rank or suit in: {card_str!r} ({self.id} notation)")
        return rank_name, suit_name


class NotationConfigLoader:
    """Loads and manages card notation configurations."""

    def __init__(self, config_dir: Path | None = None):
        """
        Initialize the loader.

        Args:
            config_dir: Directory containing notation JSON files.
                       Defaults to the notations shipped with the package.
        """
        if config_dir is None:
            config_dir = Path(__file__).parents[1] / "data" / "notations"

        self.config_dir = config_dir
        self._configs: dict[str, NotationConfig] = {}
        self._loaded = False

    def load_all_configs(self) -> None:
        """Load all notation configuration files from the directory."""
        if self._loaded:
            return

        logger.info(f"Loading card notations from {self.config_dir}")

        if not self.config_dir.exists():
            logger.error(f"Notation directory not found: {self.config_dir}")
            raise FileNotFoundError(f"Notation directory not found: {self.config_dir}")

        json_files = sorted(self.config_dir.glob("*.json"))

        if not json_files:
            logger.warning(f"No JSON notation files found in {self.config_dir}")

        for json_file in json_files:
            notation_id = json_file.stem
            try:
                self._configs[notation_id] = self._load_config_file(json_file)
                logger.debug(f"Loaded notation {notation_id}")
            except (OSError, ValueError, KeyError, TypeError) as e:
                logger.error(f"Failed to load notation from {json_file}: {e}")
                continue

        logger.info(f"Loaded {len(self._configs)} card notations")
        self._loaded = True

    def _load_config_file(self, filepath: Path) -> NotationConfig:
        """Load a single notation configuration file."""
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)

        return NotationConfig(
            id=data.get("id", filepath.stem),
            name=data.get("name", ""),
            description=data.get("description", ""),
            suit_position=data.get("suit_position", "last"),
            ranks=dict(data["ranks"]),
            suits=dict(data["suits"]),
            case_sensitive=bool(data.get("case_sensitive", False)),
        )

    def get_config(self, notation_id: str) -> NotationConfig | None:
        """
        Get configuration for a specific notation.

        Args:
            notation_id: The notation id (e.g., 'standard', 'french')

        Returns:
            NotationConfig if found, None otherwise
        """
        if not self._loaded:
            self.load_all_configs()

        return self._configs.get(notation_id)

    def get_all_configs(self) -> dict[str, NotationConfig]:
        """Get all loaded configurations."""
        if not self._loaded:
            self.load_all_configs()

        return self._configs.copy()


# Global instance
notation_config_loader = NotationConfigLoader()


def get_notation_config(notation_id: str) -> NotationConfig | None:
    """Convenience function to get a notation configuration."""
    return notation_config_loader.get_config(notation_id)
