import json
import tempfile
import unittest
from pathlib import Path

from src.qa_setup.detection import (
    frontend_integration_present,
    read_package_json,
    sail_present,
    select_package_manager,
)


class TestQaSetupDetection(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, rel: str, text: str) -> None:
        p = self.root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")

    def test_defaults_to_npm_without_lock_file(self):
        self.assertEqual(select_package_manager(self.root), "npm")

    def test_pnpm_lock_selects_pnpm(self):
        self._write("pnpm-lock.yaml", "lockfileVersion: '9.0'\n")
        self.assertEqual(select_package_manager(self.root), "pnpm")

    def test_package_manager_ignores_other_lock_files(self):
        self._write("package-lock.json", "{}")
        self._write("yarn.lock", "")
        self.assertEqual(select_package_manager(self.root), "npm")

    def test_sail_present(self):
        self.assertFalse(sail_present(self.root))
        self._write("vendor/bin/sail", "#!/usr/bin/env bash\n")
        self.assertTrue(sail_present(self.root))

    def test_read_package_json_missing(self):
        res = read_package_json(self.root)
        self.assertFalse(res.exists)
        self.assertIsNone(res.data)
        self.assertIsNone(res.error)

    def test_read_package_json_invalid_json_is_error(self):
        self._write("package.json", "{not json")
        res = read_package_json(self.root)
        self.assertTrue(res.exists)
        self.assertIsNone(res.data)
        self.assertIn("not valid JSON", res.error or "")

    def test_read_package_json_non_object_is_error(self):
        self._write("package.json", "[1, 2]")
        res = read_package_json(self.root)
        self.assertTrue(res.exists)
        self.assertIn("JSON object", res.error or "")

    def test_read_package_json_ok(self):
        self._write("package.json", json.dumps({"name": "app"}))
        res = read_package_json(self.root)
        self.assertEqual(res.data, {"name": "app"})
        self.assertIsNone(res.error)


def test_integration_detected_in_dependencies():
    pkg = {"dependencies": {"@inertiajs/inertia": "^0.11.1"}}
    assert frontend_integration_present(pkg) is True


def test_integration_detected_in_dev_dependencies_only():
    pkg = {"devDependencies": {"@inertiajs/inertia": "^0.11.1", "vite": "^5"}}
    assert frontend_integration_present(pkg) is True


def test_integration_absent_without_dependency_groups():
    assert frontend_integration_present({"name": "app"}) is False


def test_integration_ignores_non_mapping_groups():
    pkg = {"dependencies": ["@inertiajs/inertia"], "devDependencies": None}
    assert frontend_integration_present(pkg) is False


def test_integration_ignores_similar_package_names():
    pkg = {"dependencies": {"@inertiajs/vue3": "^1.0.0"}}
    assert frontend_integration_present(pkg) is False


def test_integration_none_manifest():
    assert frontend_integration_present(None) is False


if __name__ == "__main__":
    unittest.main()
