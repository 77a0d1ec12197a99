"""
Tests for dataset parsing, export, merging, custom seeds and catalog loading.
"""
import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from seedfinder.catalog.dataset import (
    CUSTOM_SEED_RARITY,
    build_custom_seed,
    export_records,
    merge,
    parse_records,
    user_subset,
)
from seedfinder.catalog.defaults import DEFAULT_SEEDS
from seedfinder.catalog.loader import load_catalog
from seedfinder.errors import MalformedImport, MalformedUserSubmission
from seedfinder.models.criteria import CustomSeedForm


class TestParseRecords:
    """Tests for parse_records."""

    def test_parses_array(self):
        payload = json.dumps([
            {"seed": 42, "edition": "Java", "version": "1.21"},
            {"seed": "-7", "edition": "Bedrock", "version": "1.20", "_user": True},
        ])

        seeds = parse_records(payload)

        assert [s.seed for s in seeds] == ["42", "-7"]
        assert seeds[1].user_added is True

    def test_accepts_bytes_with_bom(self):
        payload = "\ufeff[]".encode("utf-8")

        assert parse_records(payload) == []

    def test_big_integer_preserved(self):
        seeds = parse_records(b'[{"seed": 18446744073709551615, "edition": "Java", "version": "1.21"}]')

        assert seeds[0].seed == "18446744073709551615"

    @pytest.mark.parametrize("payload", ['{"seed": 1}', '"seeds"', "42", "null"])
    def test_non_array_rejected(self, payload):
        """Test that the top-level value must be an array."""
        with pytest.raises(MalformedImport, match="Expected a JSON array"):
            parse_records(payload)

    def test_invalid_json_rejected(self):
        with pytest.raises(MalformedImport, match="Could not parse JSON"):
            parse_records("[{not json")

    def test_invalid_record_named(self):
        payload = json.dumps([
            {"seed": "1", "edition": "Java", "version": "1.21"},
            {"seed": "2", "edition": "Console", "version": "1.21"},
        ])

        with pytest.raises(MalformedImport, match="Record 1"):
            parse_records(payload)

    def test_non_object_record_rejected(self):
        with pytest.raises(MalformedImport, match="Record 0 is not an object"):
            parse_records("[[1, 2]]")


class TestExportRecords:
    """Tests for export_records."""

    def test_round_trip(self, make_seed):
        """Test that importing an export yields the same dataset."""
        seeds = [
            *DEFAULT_SEEDS,
            make_seed(seed="-9223372036854775808", rarity=None).model_copy(update={"user_added": True}),
        ]

        assert parse_records(export_records(seeds)) == seeds

    def test_keys_outside_schema_survive_round_trip(self):
        """Test that extra keys such as a stored _score are exported unchanged."""
        text = '[{"seed": "1", "edition": "Java", "version": "1.21", "_score": 0.42, "source": "reddit"}]'

        record = json.loads(export_records(parse_records(text)))[0]

        assert record["_score"] == 0.42
        assert record["source"] == "reddit"
        assert "_user" not in record

    def test_pretty_printed_and_scoreless(self, make_seed):
        payload = export_records([make_seed()])
        text = payload.decode("utf-8")

        assert text.startswith("[\n  {")
        assert "_score" not in text
        assert "score" not in json.loads(text)[0]

    def test_non_ascii_kept_readable(self, make_seed):
        seed = make_seed().model_copy(update={"description": "Höhle"})

        assert "Höhle" in export_records([seed]).decode("utf-8")


class TestMerge:
    """Tests for merge and user_subset."""

    def test_base_first_no_dedup(self, make_seed):
        base = [make_seed(seed="1"), make_seed(seed="2")]
        user = [make_seed(seed="1").model_copy(update={"user_added": True})]

        merged = merge(base, user)

        assert [s.seed for s in merged] == ["1", "2", "1"]

    def test_user_subset(self, make_seed):
        marked = make_seed(seed="u").model_copy(update={"user_added": True})
        seeds = [make_seed(seed="a"), marked, make_seed(seed="b")]

        assert user_subset(seeds) == [marked]


class TestBuildCustomSeed:
    """Tests for custom seed submissions."""

    def test_builds_user_seed(self):
        form = CustomSeedForm(
            seed="  -123456789012  ",
            edition="Bedrock",
            version=" 1.21 ",
            biomes="Plains, Cherry Grove, ,",
            tags="Scenic,Builder",
            description=" Nice ",
            features='{"village": [{"distance": 240, "x": 120, "z": -200}]}',
        )

        seed = build_custom_seed(form)

        assert seed.seed == "-123456789012"
        assert seed.version == "1.21"
        assert seed.spawn.biomes == ["Plains", "Cherry Grove"]
        assert (seed.spawn.x, seed.spawn.z) == (0, 0)
        assert seed.tags == ["Scenic", "Builder"]
        assert seed.rarity == CUSTOM_SEED_RARITY
        assert seed.features.village[0].distance == 240
        assert seed.description == "Nice"
        assert seed.user_added is True

    def test_blank_features_allowed(self):
        seed = build_custom_seed(CustomSeedForm(seed="1", version="1.21"))

        assert seed.features.village == []

    def test_invalid_features_json(self):
        with pytest.raises(MalformedUserSubmission, match="Features JSON is invalid"):
            build_custom_seed(CustomSeedForm(seed="1", features="{village: 1"))

    def test_features_must_be_object(self):
        with pytest.raises(MalformedUserSubmission):
            build_custom_seed(CustomSeedForm(seed="1", features="[1, 2]"))

    def test_unknown_feature_kind(self):
        with pytest.raises(MalformedUserSubmission):
            build_custom_seed(CustomSeedForm(seed="1", features='{"igloo": []}'))

    def test_empty_seed(self):
        with pytest.raises(MalformedUserSubmission):
            build_custom_seed(CustomSeedForm(seed="   "))


class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_embedded_when_no_source(self):
        catalog = load_catalog(None)

        assert len(catalog.seeds) == 5
        assert catalog.source == "embedded"
        assert catalog.used_fallback is False

    def test_local_file(self, tmp_path, make_seed):
        path = tmp_path / "seeds.json"
        path.write_bytes(export_records([make_seed(seed="7")]))

        catalog = load_catalog(path)

        assert [s.seed for s in catalog.seeds] == ["7"]
        assert catalog.used_fallback is False

    def test_missing_file_falls_back(self, tmp_path):
        catalog = load_catalog(tmp_path / "missing.json")

        assert catalog.used_fallback is True
        assert catalog.seeds == DEFAULT_SEEDS
        assert "missing.json" in catalog.fallback_reason

    def test_malformed_file_falls_back(self, tmp_path):
        path = tmp_path / "seeds.json"
        path.write_text('{"not": "a list"}', encoding="utf-8")

        catalog = load_catalog(path)

        assert catalog.used_fallback is True
        assert "malformed" in catalog.fallback_reason

    @patch("seedfinder.catalog.loader.requests.get")
    def test_remote_source(self, mock_get):
        response = MagicMock()
        response.content = b'[{"seed": 1, "edition": "Java", "version": "1.21"}]'
        mock_get.return_value = response

        catalog = load_catalog("https://example.com/seeds.json", timeout=3)

        mock_get.assert_called_once_with("https://example.com/seeds.json", timeout=3)
        assert [s.seed for s in catalog.seeds] == ["1"]

    @patch("seedfinder.catalog.loader.requests.get")
    def test_remote_failure_falls_back_without_retry(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("offline")

        catalog = load_catalog("https://example.com/seeds.json")

        assert mock_get.call_count == 1
        assert catalog.used_fallback is True
        assert catalog.seeds == DEFAULT_SEEDS

    @patch("seedfinder.catalog.loader.requests.get")
    def test_remote_http_error_falls_back(self, mock_get):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("404")
        mock_get.return_value = response

        catalog = load_catalog("http://example.com/seeds.json")

        assert catalog.used_fallback is True


class TestDefaultSeeds:
    """Tests for the embedded sample catalog."""

    def test_five_distinct_samples(self):
        assert len(DEFAULT_SEEDS) == 5
        assert len({s.favorite_key for s in DEFAULT_SEEDS}) == 5
        assert not any(s.user_added for s in DEFAULT_SEEDS)
