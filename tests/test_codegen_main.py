# File: tests/test_codegen_main.py
# End-to-end tests of a generation run against a temporary project directory.

import subprocess
from unittest.mock import patch

import pytest

from ent_auto_generator.codegen_main import generate_ent_schemas, run_go_generate
from ent_auto_generator.config import GeneratorConfig
from ent_auto_generator.exceptions import GoGenerateError, MissingEnumDefinitionError, SchemaLoadError
from ent_auto_generator.introspection_dmmf import parse_document


def _config(tmp_path, dmmf_file, **overrides):
    values = {"schema_path": str(dmmf_file), "output_dir": str(tmp_path / "ent" / "schema")}
    values.update(overrides)
    return GeneratorConfig(**values)


def test_generates_all_files(tmp_path, dmmf_file):
    config = _config(tmp_path, dmmf_file)

    files = generate_ent_schemas(config)

    out = tmp_path / "ent" / "schema"
    assert sorted(p.name for p in out.iterdir()) == ["git_hub.go", "post.go", "tag.go", "user.go"]
    for generated in files:
        assert generated.path.read_text(encoding="utf-8") == generated.content


def test_second_run_produces_identical_files(tmp_path, dmmf_file):
    config = _config(tmp_path, dmmf_file, workers=4)
    out = tmp_path / "ent" / "schema"

    generate_ent_schemas(config)
    first = {p.name: p.read_bytes() for p in out.iterdir()}
    generate_ent_schemas(config)
    second = {p.name: p.read_bytes() for p in out.iterdir()}

    assert first == second


def test_preloaded_document_skips_loading(tmp_path, sample_dmmf):
    config = GeneratorConfig(schema_path=str(tmp_path / "missing.json"), output_dir=str(tmp_path / "out"))

    files = generate_ent_schemas(config, document=parse_document(sample_dmmf))

    assert len(files) == 4


def test_missing_schema_file(tmp_path):
    config = GeneratorConfig(schema_path=str(tmp_path / "missing.json"), output_dir=str(tmp_path / "out"))
    with pytest.raises(SchemaLoadError):
        generate_ent_schemas(config)


def test_missing_enum_writes_nothing(tmp_path, sample_dmmf):
    sample_dmmf["datamodel"]["enums"] = []
    config = GeneratorConfig(output_dir=str(tmp_path / "out"))

    with pytest.raises(MissingEnumDefinitionError):
        generate_ent_schemas(config, document=parse_document(sample_dmmf))

    assert not (tmp_path / "out").exists()


def test_go_generate_runs_when_enabled(tmp_path, dmmf_file):
    config = _config(tmp_path, dmmf_file, run_go_generate=True, go_generate_target="./ent")

    with patch("ent_auto_generator.codegen_main.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(["go"], 0, stdout="", stderr="")
        generate_ent_schemas(config)

    mock_run.assert_called_once()
    assert mock_run.call_args.args[0] == ["go", "generate", "./ent"]


def test_go_generate_not_run_by_default(tmp_path, dmmf_file):
    with patch("ent_auto_generator.codegen_main.subprocess.run") as mock_run:
        generate_ent_schemas(_config(tmp_path, dmmf_file))
    mock_run.assert_not_called()


def test_go_generate_non_zero_exit():
    with patch("ent_auto_generator.codegen_main.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(["go"], 2, stdout="", stderr="boom")
        with pytest.raises(GoGenerateError) as excinfo:
            run_go_generate("./ent")
    assert excinfo.value.context["returncode"] == 2
    assert excinfo.value.context["command"] == "go generate ./ent"


def test_go_generate_missing_toolchain():
    with patch("ent_auto_generator.codegen_main.subprocess.run", side_effect=FileNotFoundError("go")):
        with pytest.raises(GoGenerateError):
            run_go_generate("./ent")
