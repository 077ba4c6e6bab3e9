"""Tests for idempotent directory/file creation (authcraft.scaffolder.materializer)."""

from __future__ import annotations

from pathlib import Path

import pytest

from authcraft.errors import FilesystemWriteFailedError
from authcraft.models import ScaffoldStep, StepAction, StepKind
from authcraft.scaffolder.materializer import apply_step, ensure_directory, ensure_file

pytestmark = pytest.mark.unit


class TestEnsureDirectory:
    def test_creates_single_directory(self, tmp_path: Path):
        outcome = ensure_directory(tmp_path / "api")
        assert (tmp_path / "api").is_dir()
        assert outcome.kind is StepKind.DIRECTORY
        assert outcome.action is StepAction.CREATED
        assert outcome.created_paths == [tmp_path / "api"]

    def test_creates_full_chain_in_one_call(self, tmp_path: Path):
        target = tmp_path / "api" / "auth" / "[...nextauth]"
        outcome = ensure_directory(target)
        assert target.is_dir()
        assert outcome.created
        assert outcome.created_paths == [
            tmp_path / "api",
            tmp_path / "api" / "auth",
            target,
        ]

    def test_reports_only_new_segments(self, tmp_path: Path):
        (tmp_path / "api").mkdir()
        outcome = ensure_directory(tmp_path / "api" / "auth")
        assert outcome.created_paths == [tmp_path / "api" / "auth"]

    def test_existing_directory_is_skipped(self, tmp_path: Path):
        (tmp_path / "api").mkdir()
        (tmp_path / "api" / "keep.txt").write_text("keep", encoding="utf-8")
        outcome = ensure_directory(tmp_path / "api")
        assert outcome.action is StepAction.SKIPPED
        assert outcome.created_paths == []
        assert (tmp_path / "api" / "keep.txt").read_text(encoding="utf-8") == "keep"

    def test_twice_is_not_an_error(self, tmp_path: Path):
        first = ensure_directory(tmp_path / "a" / "b")
        second = ensure_directory(tmp_path / "a" / "b")
        assert first.created
        assert not second.created

    def test_file_in_the_way(self, tmp_path: Path):
        (tmp_path / "api").write_text("not a dir", encoding="utf-8")
        with pytest.raises(FilesystemWriteFailedError) as exc_info:
            ensure_directory(tmp_path / "api")
        assert exc_info.value.path == tmp_path / "api"

    def test_file_in_the_way_of_ancestor(self, tmp_path: Path):
        (tmp_path / "api").write_text("not a dir", encoding="utf-8")
        with pytest.raises(FilesystemWriteFailedError):
            ensure_directory(tmp_path / "api" / "auth")


class TestEnsureFile:
    def test_creates_file(self, tmp_path: Path):
        target = tmp_path / "route.ts"
        outcome = ensure_file(target, "export {};\n")
        assert target.read_text(encoding="utf-8") == "export {};\n"
        assert outcome.kind is StepKind.FILE
        assert outcome.action is StepAction.CREATED
        assert outcome.created_paths == [target]

    def test_second_write_keeps_first_content(self, tmp_path: Path):
        target = tmp_path / "route.ts"
        ensure_file(target, "first")
        outcome = ensure_file(target, "second")
        assert outcome.action is StepAction.SKIPPED
        assert target.read_text(encoding="utf-8") == "first"

    def test_existing_user_edits_untouched(self, tmp_path: Path):
        target = tmp_path / "route.ts"
        target.write_text("// my custom handler\n", encoding="utf-8")
        outcome = ensure_file(target, "generated")
        assert not outcome.created
        assert target.read_text(encoding="utf-8") == "// my custom handler\n"

    def test_existing_empty_file_untouched(self, tmp_path: Path):
        target = tmp_path / "route.ts"
        target.touch()
        ensure_file(target, "generated")
        assert target.read_text(encoding="utf-8") == ""

    def test_missing_parent_fails(self, tmp_path: Path):
        with pytest.raises(FilesystemWriteFailedError) as exc_info:
            ensure_file(tmp_path / "missing" / "route.ts", "x")
        assert exc_info.value.kind == "FilesystemWriteFailed"
        assert not (tmp_path / "missing").exists()

    def test_directory_in_the_way(self, tmp_path: Path):
        target = tmp_path / "route.ts"
        target.mkdir()
        with pytest.raises(FilesystemWriteFailedError, match="exists and is not a file") as exc_info:
            ensure_file(target, "generated")
        assert exc_info.value.path == target
        assert target.is_dir()


class TestApplyStep:
    def test_directory_step(self, tmp_path: Path):
        outcome = apply_step(ScaffoldStep.directory(tmp_path / "d"))
        assert outcome.kind is StepKind.DIRECTORY
        assert (tmp_path / "d").is_dir()

    def test_file_step(self, tmp_path: Path):
        outcome = apply_step(ScaffoldStep.file(tmp_path / "f.txt", "hello"))
        assert outcome.kind is StepKind.FILE
        assert (tmp_path / "f.txt").read_text(encoding="utf-8") == "hello"
