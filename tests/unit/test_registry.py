from __future__ import annotations

import threading
import unittest
from unittest.mock import patch

from filedigest.digest import registry as registry_module
from filedigest.digest.algorithms import Algorithm, supported_algorithms
from filedigest.digest.digesters import Crc32Digester, MessageDigestDigester
from filedigest.digest.registry import DigesterRegistry, default_registry, get_digester
from filedigest.errors import UnsupportedAlgorithm
from tests.helpers import ALL_ALGORITHMS


class AlgorithmTests(unittest.TestCase):
    def test_parse_is_case_insensitive(self) -> None:
        self.assertIs(Algorithm.parse("sha-256"), Algorithm.SHA256)
        self.assertIs(Algorithm.parse("Sha-1"), Algorithm.SHA1)
        self.assertIs(Algorithm.parse("crc32"), Algorithm.CRC32)

    def test_parse_requires_exact_spelling(self) -> None:
        for name in ("SHA256", "sha_256", " MD5", "MD5 ", "", "FOO123"):
            with self.subTest(name=name):
                with self.assertRaises(UnsupportedAlgorithm):
                    Algorithm.parse(name)

    def test_parse_rejects_non_strings(self) -> None:
        with self.assertRaises(UnsupportedAlgorithm):
            Algorithm.parse(None)  # type: ignore[arg-type]

    def test_extensions(self) -> None:
        self.assertEqual(
            {member.display_name: member.filename_extension for member in Algorithm},
            {
                "CRC32": ".crc32",
                "MD2": ".md2",
                "MD5": ".md5",
                "SHA-1": ".sha1",
                "SHA-256": ".sha256",
                "SHA-384": ".sha384",
                "SHA-512": ".sha512",
            },
        )

    def test_supported_algorithms_order(self) -> None:
        self.assertEqual(supported_algorithms(), ALL_ALGORITHMS)


class DigesterRegistryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = DigesterRegistry()

    def test_every_supported_algorithm_resolves(self) -> None:
        for name in ALL_ALGORITHMS:
            for spelling in (name, name.lower()):
                with self.subTest(algorithm=spelling):
                    digester = self.registry.get_digester(spelling)
                    self.assertEqual(digester.algorithm, name)

    def test_variant_selection(self) -> None:
        self.assertIsInstance(self.registry.get_digester("CRC32"), Crc32Digester)
        for name in ALL_ALGORITHMS[1:]:
            with self.subTest(algorithm=name):
                self.assertIsInstance(self.registry.get_digester(name), MessageDigestDigester)

    def test_unsupported_algorithm(self) -> None:
        with self.assertRaises(UnsupportedAlgorithm) as ctx:
            self.registry.get_digester("FOO123")
        self.assertEqual(ctx.exception.algorithm, "FOO123")
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertEqual(len(self.registry), 0)

    def test_same_string_returns_cached_instance(self) -> None:
        first = self.registry.get_digester("SHA-256")
        with patch("filedigest.digest.registry.build_digester") as builder:
            second = self.registry.get_digester("SHA-256")
        self.assertIs(first, second)
        builder.assert_not_called()

    def test_cache_is_keyed_by_exact_spelling(self) -> None:
        upper = self.registry.get_digester("MD5")
        lower = self.registry.get_digester("md5")
        self.assertIsNot(upper, lower)
        self.assertEqual(upper.algorithm, lower.algorithm)
        self.assertEqual(len(self.registry), 2)

    def test_settings_forwarded_to_digesters(self) -> None:
        registry = DigesterRegistry(chunk_size=123)
        self.assertEqual(registry.get_digester("MD5").chunk_size, 123)
        with self.assertRaises(ValueError):
            DigesterRegistry(chunk_size=0)

    def test_unavailable_engine_is_unsupported(self) -> None:
        with patch("filedigest.digest.digesters.hashlib.new", side_effect=ValueError("disabled")):
            with self.assertRaises(UnsupportedAlgorithm):
                self.registry.get_digester("SHA-384")
        self.assertEqual(len(self.registry), 0)

    def test_concurrent_first_access_converges(self) -> None:
        barrier = threading.Barrier(8)
        returned = []

        def worker() -> None:
            barrier.wait()
            returned.append(self.registry.get_digester("SHA-512"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(returned), 8)
        self.assertEqual(len(self.registry), 1)
        settled = self.registry.get_digester("SHA-512")
        self.assertIs(self.registry.get_digester("SHA-512"), settled)
        self.assertTrue(all(digester.algorithm == "SHA-512" for digester in returned))


class DefaultRegistryTests(unittest.TestCase):
    def test_default_registry_is_shared(self) -> None:
        with patch.object(registry_module, "_default_registry", None):
            first = default_registry()
            self.assertIs(default_registry(), first)
            self.assertIs(get_digester("CRC32"), first.get_digester("CRC32"))


if __name__ == "__main__":
    unittest.main()
