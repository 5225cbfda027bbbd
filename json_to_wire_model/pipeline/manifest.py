"""
Multi-model generation from a manifest file.

A manifest lists independent generation runs sharing one output root::

    {
      "output": "../..",
      "config": {"add_generation_comment": true},
      "models": [
        {"schema": "main/v7/response.json", "package": "pkg.v7", "class_name": "MainResponseModel7", "api_version": 7}
      ]
    }

Relative paths are resolved against the manifest's directory. Runs share
no state and may be generated concurrently; all of them are rendered
before anything is written.
"""

from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from .backends.base import SourceUnit
from .config import CodeGeneratorConfig
from .errors import DuplicateTypeName, SchemaError
from .generator import PipelineGenerator, check_units, load_schema, write_units

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelRun:
    """One generation run of a manifest."""

    schema: Path
    package: str
    class_name: str
    api_version: int | None = None
    object_path: str | None = None

    # Schema name recorded in the generation comment
    source_name: str = ""


@dataclass
class Manifest:
    """A parsed manifest."""

    output_dir: Path
    runs: list[ModelRun] = field(default_factory=list)
    config: CodeGeneratorConfig = field(default_factory=CodeGeneratorConfig)


def load_manifest(path: str | Path) -> Manifest:
    """
    Load a manifest file.

    Raises:
        SchemaError: If a run entry misses a required key
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    base = path.parent
    runs = []
    for i, entry in enumerate(data.get("models", [])):
        missing = [key for key in ("schema", "package", "class_name") if key not in entry]
        if missing:
            raise SchemaError(f"Manifest entry is missing {', '.join(missing)}", f"{path.name}:models[{i}]")
        runs.append(
            ModelRun(
                schema=base / entry["schema"],
                package=entry["package"],
                class_name=entry["class_name"],
                api_version=entry.get("api_version"),
                object_path=entry.get("object_path"),
                source_name=entry["schema"],
            )
        )

    return Manifest(
        output_dir=base / data.get("output", "."),
        runs=runs,
        config=CodeGeneratorConfig.from_dict(data.get("config", {})),
    )


def _generate_run(run: ModelRun, config: CodeGeneratorConfig) -> list[SourceUnit]:
    generator = PipelineGenerator(
        run.class_name,
        load_schema(run.schema),
        config,
        package=run.package,
        source_name=run.source_name or run.schema.name,
        api_version=run.api_version,
        object_path=run.object_path,
    )
    return generator.generate()


def generate_all(manifest: Manifest, jobs: int = 1) -> list[SourceUnit]:
    """
    Generate the units of every run, in manifest order.

    Args:
        manifest: The manifest to generate
        jobs: Number of runs generated concurrently

    Raises:
        DuplicateTypeName: If two runs emit the same (package, type name)
    """
    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            results = list(pool.map(lambda run: _generate_run(run, manifest.config), manifest.runs))
    else:
        results = [_generate_run(run, manifest.config) for run in manifest.runs]

    units: list[SourceUnit] = []
    owners: dict[tuple[str, str], str] = {}
    for run, run_units in zip(manifest.runs, results):
        for unit in run_units:
            key = (unit.package, unit.module_name)
            if key in owners:
                raise DuplicateTypeName(f"{unit.qualified_name} is generated by both {owners[key]} and {run.source_name}", unit.qualified_name)
            owners[key] = run.source_name
            units.append(unit)

    logger.info("Generated %d unit(s) from %d run(s)", len(units), len(manifest.runs))
    return units


def write_all(manifest: Manifest, jobs: int = 1) -> list[Path]:
    """Generate every run and write all units atomically."""
    return write_units(generate_all(manifest, jobs), manifest.output_dir, manifest.config)


def check_all(manifest: Manifest, jobs: int = 1) -> None:
    """Raise StaleOutputError if any unit on disk is out of date."""
    check_units(generate_all(manifest, jobs), manifest.output_dir)
