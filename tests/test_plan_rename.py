"""Tests for per-candidate previews and batch collision resolution."""

from datetime import datetime

import pytest

from core.models_fs import Candidate, ComponentKind, RenameComponent
from core.plan_rename import (
    build_all_previews,
    build_file_preview,
    build_preview_rows,
    build_sample_preview,
    find_duplicate_names,
    folder_name_of,
    normalize_extension,
    stem_of,
)

FOLDER = RenameComponent.of(ComponentKind.FOLDER_NAME)
STEM = RenameComponent.of(ComponentKind.ORIGINAL_STEM)
DATE_CREATED = RenameComponent.of(ComponentKind.DATE_CREATED)
TIME_MODIFIED = RenameComponent.of(ComponentKind.TIME_MODIFIED)
SEQ = RenameComponent.sequence()

NOW = datetime(2021, 5, 6, 7, 8, 9)
CREATED = 1700000000
MODIFIED = 1710000000


def make_candidate(path, extension=None, created=CREATED, mtime=MODIFIED):
    """Build a candidate from a forward-slash path."""
    folder, _, name = path.rpartition("/")
    if extension is None:
        dot = name.rfind(".")
        extension = name[dot:] if dot > 0 else ""
    return Candidate(path=path, name=name, folder=folder, extension=extension,
                     created=created, mtime=mtime)


class TestCandidateInputs:
    """Test derivation of evaluator inputs from candidate metadata."""

    @pytest.mark.parametrize("folder, expected", [
        ("/data/photos", "photos"),
        ("C:\\Users\\me\\Pictures\\", "Pictures"),
        ("/data//mixed\\dir/", "dir"),
        ("", "folder"),
        ("///", "folder"),
    ])
    def test_folder_name(self, folder, expected):
        assert folder_name_of(folder) == expected

    @pytest.mark.parametrize("name, expected", [
        ("photo.jpg", "photo"),
        ("archive.tar.gz", "archive.tar"),
        (".gitignore", ".gitignore"),
        (".env.local", ".env"),
        ("README", "README"),
        ("", ""),
    ])
    def test_stem(self, name, expected):
        assert stem_of(name) == expected

    @pytest.mark.parametrize("extension, expected", [
        (".jpg", ".jpg"),
        ("jpg", ".jpg"),
        ("", ""),
    ])
    def test_extension(self, extension, expected):
        assert normalize_extension(extension) == expected

    def test_dotfile_keeps_whole_name_as_stem(self):
        c = make_candidate("/repo/.gitignore", extension="")
        assert build_file_preview([STEM], "_", c) == "gitignore"

    def test_extension_without_dot_gets_one(self):
        c = make_candidate("/d/photo.JPG", extension="JPG")
        assert build_file_preview([STEM], "-", c) == "photo.JPG"

    def test_known_timestamps_are_local_time(self):
        c = make_candidate("/d/a.jpg")
        expected_date = datetime.fromtimestamp(CREATED).strftime("%Y%m%d")
        expected_time = datetime.fromtimestamp(MODIFIED).strftime("%H%M%S")
        name = build_file_preview([DATE_CREATED, TIME_MODIFIED], "_", c, now=NOW)
        assert name == f"{expected_date}_{expected_time}.jpg"

    @pytest.mark.parametrize("created, mtime", [(0, 0), (-1, -100)])
    def test_unknown_timestamps_use_now(self, created, mtime):
        c = make_candidate("/d/a.jpg", created=created, mtime=mtime)
        name = build_file_preview([DATE_CREATED, TIME_MODIFIED], "_", c, now=NOW)
        assert name == "20210506_070809.jpg"

    def test_sequence_value_is_forwarded(self):
        c = make_candidate("/d/photo.jpg")
        assert build_file_preview([STEM, SEQ], "_", c, seq=2) == "photo_002.jpg"


class TestBuildAllPreviews:
    """Test the two-pass collision-aware batch preview."""

    def test_single_candidate_passthrough(self):
        c = make_candidate("/d/photo.JPG")
        assert build_all_previews([c], [STEM], "-") == {"/d/photo.JPG": "photo.JPG"}

    def test_folder_literal_stem(self):
        c = make_candidate("/home/My Docs/report.pdf")
        previews = build_all_previews([c], [FOLDER, RenameComponent.literal("backup"), STEM], "_")
        assert previews == {"/home/My Docs/report.pdf": "My Docs_backup_report.pdf"}

    def test_collision_group_is_numbered(self):
        a = make_candidate("/x/photo.jpg")
        b = make_candidate("/y/photo.jpg")
        previews = build_all_previews([a, b], [STEM, SEQ], "_")
        assert previews == {"/x/photo.jpg": "photo_001.jpg", "/y/photo.jpg": "photo_002.jpg"}

    def test_different_extensions_do_not_collide(self):
        a = make_candidate("/d/photo.jpg")
        b = make_candidate("/d/photo.png")
        previews = build_all_previews([a, b], [STEM, SEQ], "_")
        assert previews == {"/d/photo.jpg": "photo.jpg", "/d/photo.png": "photo.png"}

    def test_without_sequence_duplicates_are_returned(self):
        a = make_candidate("/x/photo.jpg")
        b = make_candidate("/y/photo.jpg")
        previews = build_all_previews([a, b], [STEM], "_")
        assert previews == {"/x/photo.jpg": "photo.jpg", "/y/photo.jpg": "photo.jpg"}

    def test_dotfile(self):
        c = make_candidate("/repo/.gitignore", extension="")
        assert build_all_previews([c], [STEM], "_") == {"/repo/.gitignore": "gitignore"}

    def test_empty_schema_falls_back_to_stem(self):
        a = make_candidate("/d/My:File.txt")
        b = make_candidate("/d/....bin")
        previews = build_all_previews([a, b], [], "_")
        assert previews == {"/d/My:File.txt": "My_File.txt", "/d/....bin": "file.bin"}

    def test_empty_batch(self):
        assert build_all_previews([], [STEM, SEQ], "_") == {}

    def test_one_entry_per_candidate(self):
        batch = [make_candidate(f"/d{i}/img{i % 2}.jpg") for i in range(12)]
        previews = build_all_previews(batch, [STEM, SEQ], "_")
        assert len(previews) == len(batch)
        assert set(previews) == {c.path for c in batch}

    def test_ordinals_follow_input_order(self):
        # Interleaved groups; ordinals must follow list order, not name or time
        batch = [
            make_candidate("/z/b.jpg", mtime=5),
            make_candidate("/a/a.jpg", mtime=4),
            make_candidate("/y/b.jpg", mtime=3),
            make_candidate("/m/unique.jpg", mtime=2),
            make_candidate("/b/a.jpg", mtime=1),
            make_candidate("/x/b.jpg", mtime=9),
        ]
        previews = build_all_previews(batch, [STEM, SEQ], "-")
        assert [previews[c.path] for c in batch] == [
            "b-001.jpg", "a-001.jpg", "b-002.jpg", "unique.jpg", "a-002.jpg", "b-003.jpg",
        ]

    def test_ordinals_exhaust_group(self):
        batch = [make_candidate(f"/d{i}/same.txt") for i in range(7)]
        previews = build_all_previews(batch, [RenameComponent.sequence(2), STEM], "_")
        assert sorted(previews.values()) == [f"{i:02d}_same.txt" for i in range(1, 8)]

    def test_unique_names_match_base_pass(self):
        batch = [make_candidate("/d/a.jpg"), make_candidate("/d/b.jpg"), make_candidate("/e/a.jpg")]
        previews = build_all_previews(batch, [STEM, SEQ], "_")
        assert previews["/d/b.jpg"] == build_file_preview([STEM, SEQ], "_", batch[1])

    def test_deterministic_with_fixed_timestamps(self):
        batch = [make_candidate("/d/a.jpg"), make_candidate("/e/a.jpg"), make_candidate("/d/c.png")]
        components = [FOLDER, DATE_CREATED, TIME_MODIFIED, SEQ]
        assert build_all_previews(batch, components, "_") == build_all_previews(batch, components, "_")

    def test_unknown_timestamps_share_one_now(self):
        batch = [make_candidate("/d/a.jpg", created=0), make_candidate("/e/b.jpg", created=0)]
        previews = build_all_previews(batch, [DATE_CREATED, SEQ], "_", now=NOW)
        assert previews == {"/d/a.jpg": "20210506_001.jpg", "/e/b.jpg": "20210506_002.jpg"}


class TestBuildPreviewRows:
    """Test preview rows used for display and hand-off."""

    def test_rows_in_input_order(self):
        batch = [make_candidate("/d/b.jpg"), make_candidate("/d/a.jpg")]
        rows = build_preview_rows(batch, [STEM], "_")
        assert [r.candidate.path for r in rows] == ["/d/b.jpg", "/d/a.jpg"]

    def test_changed_flag(self):
        batch = [make_candidate("/d/a.jpg"), make_candidate("/d/b.jpg")]
        rows = build_preview_rows(batch, [STEM, RenameComponent.literal("x")], "_")
        assert [r.changed for r in rows] == [True, True]
        rows = build_preview_rows(batch, [STEM], "_")
        assert [r.changed for r in rows] == [False, False]

    def test_collision_notes(self):
        batch = [make_candidate("/x/photo.jpg"), make_candidate("/y/photo.jpg"), make_candidate("/x/z.jpg")]
        rows = build_preview_rows(batch, [STEM, SEQ], "_")
        assert [r.sequence for r in rows] == [1, 2, None]
        assert rows[0].note == "collision 1/2: photo.jpg"
        assert rows[1].note == "collision 2/2: photo.jpg"
        assert rows[2].note == ""

    def test_duplicate_note_without_sequence(self):
        batch = [make_candidate("/x/photo.jpg"), make_candidate("/y/photo.jpg")]
        rows = build_preview_rows(batch, [STEM], "_")
        assert all("no sequence component" in r.note for r in rows)

    def test_no_ordinal_recorded_without_sequence(self):
        batch = [make_candidate("/x/p.jpg"), make_candidate("/y/p.jpg")]
        rows = build_preview_rows(batch, [STEM], "_")
        assert [r.new_name for r in rows] == ["p.jpg", "p.jpg"]
        assert [r.sequence for r in rows] == [None, None]

    def test_invalid_result_is_noted(self):
        c = make_candidate("/d/a.t|t", extension=".t|t")
        rows = build_preview_rows([c], [STEM], "_")
        assert rows[0].new_name == "a.t|t"
        assert "invalid character" in rows[0].note


class TestFindDuplicateNames:
    """Test reporting of names shared after resolution."""

    def test_reports_shared_names(self):
        previews = {"/x/a.jpg": "a.jpg", "/y/a.jpg": "a.jpg", "/z/b.jpg": "b.jpg"}
        assert find_duplicate_names(previews) == {"a.jpg": ["/x/a.jpg", "/y/a.jpg"]}

    def test_no_duplicates(self):
        assert find_duplicate_names({"/x/a.jpg": "a_001.jpg", "/y/a.jpg": "a_002.jpg"}) == {}


class TestBuildSamplePreview:
    """Test the placeholder-metadata preview."""

    def test_sample(self):
        components = [FOLDER, DATE_CREATED, TIME_MODIFIED, SEQ]
        assert build_sample_preview(components, "_") == "Downloads_20240415_144500.jpg"

    def test_empty_schema(self):
        assert build_sample_preview([], "-") == "photo.jpg"
