import pytest

from sunder.categories import (
    CATEGORIES, FOLDER_CATEGORIES, OTHER, classify_folder, group_by_category,
)
from sunder.models import CategorizedFolder


@pytest.mark.parametrize("name,category", [
    (".colima", "Virtual Machines & Containers"),
    (".orbstack", "Virtual Machines & Containers"),
    ("node_modules", "Package Caches"),
    (".pnpm-store", "Package Caches"),
    (".nuget", "Package Caches"),
    ("target", "Build Artifacts"),
    ("__pycache__", "Build Artifacts"),
    (".build", "Build Artifacts"),
    ("Library", "System Libraries"),
    (".Trash", "Trash"),
    ("Documents", "User Files"),
    ("Public", "User Files"),
])
def test_known_names(name, category):
    assert classify_folder(name) == category


@pytest.mark.parametrize("name", [
    "library", "DOCUMENTS", "node_modules2", "my-build", "", ".trash", "Projects",
])
def test_unknown_names_are_other(name):
    assert classify_folder(name) == OTHER


def test_table_only_uses_known_categories():
    assert len(FOLDER_CATEGORIES) == 35
    assert set(FOLDER_CATEGORIES.values()) <= set(CATEGORIES)
    assert OTHER in CATEGORIES


def test_table_is_read_only():
    with pytest.raises(TypeError):
        FOLDER_CATEGORIES["Projects"] = "User Files"


def _folder(name, size):
    return CategorizedFolder(name=name, path="/h/" + name, size_bytes=size,
                             category=classify_folder(name))


def test_group_by_category_totals_and_order():
    folders = [
        _folder("Library", 500),
        _folder("node_modules", 300),
        _folder(".npm", 250),
        _folder("Documents", 100),
        _folder("Projects", 5),
    ]
    groups = group_by_category(folders)
    assert [(g.category, g.total_bytes) for g in groups] == [
        ("Package Caches", 550),
        ("System Libraries", 500),
        ("User Files", 100),
        ("Other", 5),
    ]
    assert [f.name for f in groups[0].folders] == ["node_modules", ".npm"]


def test_group_by_category_ties_keep_first_seen_order():
    groups = group_by_category([_folder("Desktop", 7), _folder(".Trash", 7)])
    assert [g.category for g in groups] == ["User Files", "Trash"]


def test_group_by_category_empty():
    assert group_by_category([]) == []
