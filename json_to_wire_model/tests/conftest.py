from __future__ import annotations

import importlib
import uuid
from pathlib import Path

import pytest

from json_to_wire_model.pipeline import CodeGeneratorConfig, PipelineGenerator
from json_to_wire_model.pipeline.backends import PythonBackend

TEST_DATA_DIR = Path(__file__).parent / "test_data"


@pytest.fixture
def test_data_dir():
    return TEST_DATA_DIR


@pytest.fixture
def load_generated(tmp_path, monkeypatch):
    """Generate a document into a fresh importable package and import its root module."""
    monkeypatch.syspath_prepend(str(tmp_path))

    def load(schema, class_name="TestClass", config=None):
        package = f"wm_{uuid.uuid4().hex}"
        (tmp_path / package).mkdir()
        (tmp_path / package / "__init__.py").write_text("", encoding="utf-8")
        generator = PipelineGenerator(class_name, schema, config or CodeGeneratorConfig(), package=package)
        generator.write(tmp_path)
        importlib.invalidate_caches()
        return importlib.import_module(f"{package}.{PythonBackend.module_name(class_name)}")

    return load
