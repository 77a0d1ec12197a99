"""
Dataset merge, import/export codec and custom seed submissions.
"""
import json
import logging
from typing import Any, Iterable, Union

from pydantic import ValidationError

from ..errors import MalformedImport, MalformedUserSubmission
from ..models.criteria import CustomSeedForm
from ..models.seed import Seed


logger = logging.getLogger(__name__)

EXPORT_FILE_NAME = "minecraft-seeds-export.json"

# Rarity assigned to user submissions
CUSTOM_SEED_RARITY = 50


def merge(base: Iterable[Seed], user: Iterable[Seed]) -> list[Seed]:
    """
    Base catalog followed by user entries. Duplicates are kept: a user entry
    may independently verify a catalog seed.
    """
    return [*base, *user]


def user_subset(seeds: Iterable[Seed]) -> list[Seed]:
    """Entries carrying the user-added marker."""
    return [seed for seed in seeds if seed.user_added]


def _describe(error: ValidationError) -> str:
    """Short human-readable form of the first validation problem."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "record"
    return f"{location}: {first.get('msg', 'invalid value')}"


def parse_records(payload: Union[bytes, str]) -> list[Seed]:
    """
    Parse a JSON array of seed records.

    All-or-nothing: a single bad record rejects the whole payload.

    Raises:
        MalformedImport: payload is not JSON, not an array, or holds an invalid record
    """
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise MalformedImport(f"File is not UTF-8 text: {e}") from e

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise MalformedImport(f"Could not parse JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedImport(
            f"Expected a JSON array of seed records, got {type(data).__name__}"
        )

    seeds = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise MalformedImport(
                f"Record {index} is not an object (got {type(record).__name__})"
            )
        try:
            seeds.append(Seed.model_validate(record))
        except ValidationError as e:
            raise MalformedImport(f"Record {index} is invalid: {_describe(e)}") from e

    logger.info(f"Parsed {len(seeds)} seed records")
    return seeds


def export_records(seeds: Iterable[Seed]) -> bytes:
    """Pretty-printed JSON array of canonical records. Scores are never included."""
    records = [seed.to_record() for seed in seeds]
    return json.dumps(records, indent=2, ensure_ascii=False).encode("utf-8")


def _split_list(text: str) -> list[str]:
    return [part.strip() for part in text.split(",") if part.strip()]


def build_custom_seed(form: CustomSeedForm) -> Seed:
    """
    Turn a submission form into a user-added seed.

    Raises:
        MalformedUserSubmission: features JSON is invalid or a field fails validation
    """
    features_text = form.features.strip()
    try:
        features: Any = json.loads(features_text) if features_text else {}
    except json.JSONDecodeError as e:
        raise MalformedUserSubmission("Features JSON is invalid.") from e

    if not isinstance(features, dict):
        raise MalformedUserSubmission("Features JSON must be an object keyed by feature kind.")

    record = {
        "seed": form.seed.strip(),
        "edition": form.edition,
        "version": form.version.strip(),
        "spawn": {"biomes": _split_list(form.biomes), "x": 0, "z": 0},
        "tags": _split_list(form.tags),
        "rarity": CUSTOM_SEED_RARITY,
        "features": features,
        "description": form.description.strip(),
        "_user": True,
    }

    try:
        seed = Seed.model_validate(record)
    except ValidationError as e:
        raise MalformedUserSubmission(f"Seed could not be added: {_describe(e)}") from e

    logger.info(f"Built custom seed {seed.seed} ({seed.edition} {seed.version})")
    return seed
