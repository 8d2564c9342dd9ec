#!/usr/bin/env python3
import json
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

from community_claim.addresses import (
    AddressNotFound,
    build_deployments,
    load_chain_addresses,
    resolve_claim_contract,
)

BASE_CLAIM = "0x" + "cc" * 18 + "3333"
BASE_TOKEN = "0x" + "ee" * 18 + "5555"
SEPOLIA_DEV_CLAIM = "0x" + "dd" * 18 + "4444"


class AddressRegistryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = TemporaryDirectory()
        self.addresses_dir = Path(self.tmp.name)
        self._write("8453.json", {"ZORA_TOKEN": BASE_TOKEN, "ZORA_TOKEN_COMMUNITY_CLAIM": BASE_CLAIM})
        self._write("84532.json", {"DEVELOPMENT_COMMUNITY_CLAIM": SEPOLIA_DEV_CLAIM, "ZORA_TOKEN": ""})
        self._write("README.json", {"ZORA_TOKEN": BASE_TOKEN})
        (self.addresses_dir / "1.txt").write_text("not an address file")

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def _write(self, name, data):
        with open(self.addresses_dir / name, "w") as f:
            json.dump(data, f)

    def test_load_chain_addresses(self):
        chain_addresses = load_chain_addresses(self.addresses_dir)
        self.assertEqual({8453, 84532}, set(chain_addresses))
        self.assertEqual(BASE_CLAIM, chain_addresses[8453]["ZORA_TOKEN_COMMUNITY_CLAIM"])

    def test_build_deployments(self):
        deployments = build_deployments(load_chain_addresses(self.addresses_dir))
        self.assertEqual(
            {
                "ZoraTokenCommunityClaim": {8453: BASE_CLAIM},
                "Zora": {8453: BASE_TOKEN},
                "DevelopmentCommunityClaim": {84532: SEPOLIA_DEV_CLAIM},
            },
            deployments,
        )

    def test_resolve_claim_contract(self):
        self.assertEqual(BASE_CLAIM, resolve_claim_contract(8453, self.addresses_dir))
        self.assertEqual(
            SEPOLIA_DEV_CLAIM,
            resolve_claim_contract(84532, self.addresses_dir, deployment="DevelopmentCommunityClaim"),
        )

    def test_missing_address(self):
        with self.assertRaises(AddressNotFound):
            resolve_claim_contract(84532, self.addresses_dir)
        with self.assertRaises(AddressNotFound):
            resolve_claim_contract(10, self.addresses_dir)

    def test_unknown_deployment(self):
        with self.assertRaises(ValueError):
            resolve_claim_contract(8453, self.addresses_dir, deployment="Unknown")

    def test_directory_from_environment(self):
        with patch.dict("os.environ", {"COMMUNITY_CLAIM_ADDRESSES_DIR": str(self.addresses_dir)}):
            self.assertEqual(BASE_CLAIM, resolve_claim_contract(8453))

    def test_duplicate_chain_id(self):
        self._write("08453.json", {"ZORA_TOKEN_COMMUNITY_CLAIM": SEPOLIA_DEV_CLAIM})
        with self.assertRaises(ValueError):
            load_chain_addresses(self.addresses_dir)

    def test_invalid_json(self):
        (self.addresses_dir / "10.json").write_text("{not json")
        with self.assertRaises(json.JSONDecodeError):
            load_chain_addresses(self.addresses_dir)


if __name__ == "__main__":
    unittest.main()
