#!/usr/bin/env python3
"""
Generator Profiles
==================
Named generator configurations (sample set, length bounds, strategies,
seed) and their plain-dict / YAML form.

Strategies are stored as a kind tag plus the settings snapshot returned by
`get_settings()`, and rebuilt through the registries below.

Usage:
    from namekit.profiles import get_profile

    profile = get_profile("borderlands")
    names = profile.create_generator().generate(10)
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

import yaml

from namekit.errors import ConfigurationError
from namekit.generators import (
    BeginningCapitalsSpellingStrategy,
    CharDepthSequencingStrategy,
    DelimiterSequencingStrategy,
    MarkovWordGenerator,
    SequencingStrategy,
    SpellingStrategy,
)
from namekit.settings import load_app_settings

logger = logging.getLogger(__name__)

SEQUENCING_STRATEGIES: Dict[str, Type[SequencingStrategy]] = {
    CharDepthSequencingStrategy.kind: CharDepthSequencingStrategy,
    DelimiterSequencingStrategy.kind: DelimiterSequencingStrategy,
}

SPELLING_STRATEGIES: Dict[str, Type[SpellingStrategy]] = {
    BeginningCapitalsSpellingStrategy.kind: BeginningCapitalsSpellingStrategy,
}


def build_sequencing_strategy(kind: str, settings: Optional[dict] = None) -> SequencingStrategy:
    """Rebuild a sequencing strategy from its kind tag and settings snapshot."""
    strategy_cls = SEQUENCING_STRATEGIES.get(kind)
    if strategy_cls is None:
        available = ', '.join(sorted(SEQUENCING_STRATEGIES))
        raise ConfigurationError(
            f"Cannot get sequencing strategy for '{kind}'. Available: {available}"
        )
    return strategy_cls.from_settings(settings or {})


def build_spelling_strategy(kind: Optional[str], settings: Optional[dict] = None) -> Optional[SpellingStrategy]:
    """Rebuild a spelling strategy; a missing kind means no spelling."""
    if not kind:
        return None
    strategy_cls = SPELLING_STRATEGIES.get(kind)
    if strategy_cls is None:
        available = ', '.join(sorted(SPELLING_STRATEGIES))
        raise ConfigurationError(
            f"Cannot get spelling strategy for '{kind}'. Available: {available}"
        )
    return strategy_cls.from_settings(settings or {})


PROFILE_KEYS = frozenset({
    'id', 'name', 'sample_set', 'target_length_min', 'target_length_max',
    'sequencing_strategy', 'sequencing_strategy_settings',
    'spelling_strategy', 'spelling_strategy_settings', 'seed',
})


@dataclass
class GeneratorProfile:
    """A named, storable generator configuration."""
    id: str
    name: str
    sample_set: List[str] = field(default_factory=list)
    target_length_min: int = 1
    target_length_max: int = 1
    sequencing_strategy: Optional[SequencingStrategy] = None
    spelling_strategy: Optional[SpellingStrategy] = None
    seed: Optional[str] = None
    # Keys this version does not interpret (e.g. entropy, endingPickMode);
    # carried through to_dict() unchanged
    extras: Dict[str, Any] = field(default_factory=dict)

    def create_generator(self) -> MarkovWordGenerator:
        """Build a generator; raises ConfigurationError on invalid settings."""
        return MarkovWordGenerator(
            sample_set=self.sample_set,
            target_length_min=self.target_length_min,
            target_length_max=self.target_length_max,
            sequencing_strategy=self.sequencing_strategy,
            spelling_strategy=self.spelling_strategy,
            seed=self.seed,
        )

    def to_dict(self) -> dict:
        """Serialize profile to dictionary"""
        data = {
            'id': self.id,
            'name': self.name,
            'sample_set': list(self.sample_set),
            'target_length_min': self.target_length_min,
            'target_length_max': self.target_length_max,
            'sequencing_strategy': self.sequencing_strategy.kind if self.sequencing_strategy else None,
            'sequencing_strategy_settings': (
                self.sequencing_strategy.get_settings() if self.sequencing_strategy else {}
            ),
            'spelling_strategy': self.spelling_strategy.kind if self.spelling_strategy else None,
            'spelling_strategy_settings': (
                self.spelling_strategy.get_settings() if self.spelling_strategy else {}
            ),
            'seed': self.seed,
        }
        for key, value in self.extras.items():
            data.setdefault(key, value)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeneratorProfile':
        """Deserialize profile from dictionary"""
        if not isinstance(data, dict):
            raise ConfigurationError(f"Profile must be a mapping (got {type(data).__name__})")
        if not data.get('id'):
            raise ConfigurationError("Profile is missing an `id`")

        extras = {k: v for k, v in data.items() if k not in PROFILE_KEYS}
        if extras:
            logger.debug(f"Profile '{data['id']}': keeping unused keys {', '.join(map(str, extras))}")

        return cls(
            id=str(data['id']),
            name=data.get('name') or str(data['id']),
            sample_set=list(data.get('sample_set') or []),
            target_length_min=data.get('target_length_min'),
            target_length_max=data.get('target_length_max'),
            sequencing_strategy=build_sequencing_strategy(
                data.get('sequencing_strategy'),
                data.get('sequencing_strategy_settings'),
            ),
            spelling_strategy=build_spelling_strategy(
                data.get('spelling_strategy'),
                data.get('spelling_strategy_settings'),
            ),
            seed=data.get('seed'),
            extras=extras,
        )


# =============================================================================
# YAML files
# =============================================================================

def default_profiles_path() -> Path:
    return load_app_settings().profiles_path


def load_profiles(path: Optional[Path] = None) -> Dict[str, GeneratorProfile]:
    """
    Load all profiles from a YAML file.

    Args:
        path: Profiles file; defaults to the `profiles.path` setting

    Returns:
        Mapping of profile id -> GeneratorProfile, in file order
    """
    path = Path(path) if path is not None else default_profiles_path()
    if not path.exists():
        raise FileNotFoundError(f"Missing profiles file: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    profiles = {}
    for entry in data.get('profiles') or []:
        profile = GeneratorProfile.from_dict(entry)
        if profile.id in profiles:
            logger.warning(f"Duplicate profile id '{profile.id}' in {path}; keeping the last one")
        profiles[profile.id] = profile

    logger.debug(f"Loaded {len(profiles)} profiles from {path}")
    return profiles


def get_profile(profile_id: str, path: Optional[Path] = None) -> GeneratorProfile:
    """Get a single profile by id."""
    profiles = load_profiles(path)
    profile = profiles.get(profile_id)
    if profile is None:
        available = ', '.join(profiles) or 'none'
        raise ConfigurationError(f"Unknown profile '{profile_id}'. Available profiles: {available}")
    return profile


def dump_profiles(profiles, path: Path) -> None:
    """Write profiles to a YAML file."""
    if isinstance(profiles, dict):
        profiles = list(profiles.values())
    data = {'profiles': [p.to_dict() for p in profiles]}
    Path(path).write_text(
        yaml.safe_dump(data, allow_unicode=True, sort_keys=False),
        encoding='utf-8',
    )


__all__ = [
    'SEQUENCING_STRATEGIES',
    'SPELLING_STRATEGIES',
    'GeneratorProfile',
    'build_sequencing_strategy',
    'build_spelling_strategy',
    'load_profiles',
    'get_profile',
    'dump_profiles',
    'default_profiles_path',
]
