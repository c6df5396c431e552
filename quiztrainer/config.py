import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


# Seed content for a brand new store
DEFAULT_QUIZZES: List[Dict[str, str]] = [
    {"question": "Capital of Italy", "answer": "Rome"},
    {"question": "Capital of France", "answer": "Paris"},
    {"question": "Capital of Spain", "answer": "Madrid"},
    {"question": "Capital of Portugal", "answer": "Lisbon"},
]


@dataclass
class TrainerConfig:
    """Settings for one quiz trainer run"""
    store_path: str = "quizzes.json"
    prompt: str = "quiz > "
    use_color: bool = True
    seed: Optional[int] = None  # RNG seed for play, None for fresh entropy
    log_level: str = "WARNING"
    authors: List[str] = field(default_factory=lambda: ["The quiztrainer developers"])
    default_quizzes: List[Dict[str, str]] = field(
        default_factory=lambda: [dict(q) for q in DEFAULT_QUIZZES]
    )

    def to_dict(self) -> dict:
        return {
            'store_path': self.store_path,
            'prompt': self.prompt,
            'use_color': self.use_color,
            'seed': self.seed,
            'log_level': self.log_level,
            'authors': list(self.authors),
            'default_quizzes': [dict(q) for q in self.default_quizzes],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'TrainerConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})


def load_config(path: Optional[str] = None) -> TrainerConfig:
    """Load a TrainerConfig from a JSON file, or the defaults when no path is given."""
    if path is None:
        return TrainerConfig()

    config_file = Path(path)
    with open(config_file, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_file} must hold a JSON object")

    logger.info("Loaded config from %s", config_file)
    return TrainerConfig.from_dict(data)
