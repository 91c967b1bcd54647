import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from pixeldemo_core.config import AppConfig, load_config, save_config


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual((cfg.window.width, cfg.window.height), (500, 500))
            self.assertEqual(cfg.window.title, "Test - ESC to exit")
            self.assertEqual(cfg.frame.target_fps, 60)
            self.assertEqual(cfg.frame.phase_divisor_ms, 90)

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.window.width = 640
            cfg.frame.target_fps = 30
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.window.width, 640)
            self.assertEqual(reloaded.frame.target_fps, 30)

    def test_values_are_normalized(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "window": {"width": 5, "height": 99999, "unknown": 1},
                "frame": {"target_fps": 0},
                "logging": {"level": "chatty"},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.window.width, 100)
            self.assertEqual(cfg.window.height, 4096)
            self.assertEqual(cfg.frame.target_fps, 1)
            self.assertEqual(cfg.logging.level, "INFO")
            self.assertFalse(hasattr(cfg.window, "unknown"))

    def test_wrong_value_types_fall_back_to_defaults(self):
        cases = [
            ({"window": {"width": "wide", "height": None, "title": 42}}, "window"),
            ({"frame": {"target_fps": None, "phase_divisor_ms": [90]}}, "frame"),
            ({"logging": {"keep_files": "many"}}, "logging"),
            ({"config_version": "x"}, "version"),
        ]
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            for raw, label in cases:
                path.write_text(json.dumps(raw), encoding="utf-8")
                cfg = load_config(path)
                self.assertEqual((cfg.window.width, cfg.window.height), (500, 500), label)
                self.assertEqual(cfg.window.title, "Test - ESC to exit", label)
                self.assertEqual(cfg.frame.target_fps, 60, label)
                self.assertEqual(cfg.frame.phase_divisor_ms, 90, label)
                self.assertEqual(cfg.logging.keep_files, 7, label)
                self.assertEqual(cfg.config_version, 1, label)

    def test_numeric_strings_are_accepted(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"window": {"width": "640"}}), encoding="utf-8")
            self.assertEqual(load_config(path).window.width, 640)

    def test_corrupt_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.window.width, 500)


if __name__ == "__main__":
    unittest.main()
