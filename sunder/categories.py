from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterable, List

from .models import CategorizedFolder, CategoryGroup

VMS_AND_CONTAINERS = "Virtual Machines & Containers"
PACKAGE_CACHES = "Package Caches"
BUILD_ARTIFACTS = "Build Artifacts"
SYSTEM_LIBRARIES = "System Libraries"
TRASH = "Trash"
USER_FILES = "User Files"
OTHER = "Other"

CATEGORIES = (
    VMS_AND_CONTAINERS,
    PACKAGE_CACHES,
    BUILD_ARTIFACTS,
    SYSTEM_LIBRARIES,
    TRASH,
    USER_FILES,
    OTHER,
)

_FOLDERS_BY_CATEGORY = {
    VMS_AND_CONTAINERS: (".colima", ".docker", ".lima", ".orbstack", ".multipass"),
    PACKAGE_CACHES: ("node_modules", ".npm", ".yarn", ".pnpm-store", ".rustup", ".cargo",
                     ".gradle", ".m2", ".cocoapods", ".pub-cache", ".nuget"),
    BUILD_ARTIFACTS: ("target", "dist", "build", ".next", ".turbo", "__pycache__",
                      ".angular", "out", ".build"),
    SYSTEM_LIBRARIES: ("Library",),
    TRASH: (".Trash",),
    USER_FILES: ("Applications", "Desktop", "Documents", "Downloads",
                 "Movies", "Music", "Pictures", "Public"),
}

# folder base name -> category; exact, case-sensitive
FOLDER_CATEGORIES = MappingProxyType({
    name: category
    for category, names in _FOLDERS_BY_CATEGORY.items()
    for name in names
})

def classify_folder(name: str) -> str:
    return FOLDER_CATEGORIES.get(name, OTHER)

def group_by_category(folders: Iterable[CategorizedFolder]) -> List[CategoryGroup]:
    """Group folders by category, biggest group first.

    Groups appear in first-seen order before sorting, and the sort is stable,
    so groups of equal size keep that order. Folders inside a group keep the
    order they were given in.
    """
    groups: Dict[str, CategoryGroup] = {}
    for f in folders:
        g = groups.get(f.category)
        if g is None:
            g = groups[f.category] = CategoryGroup(category=f.category)
        g.total_bytes += f.size_bytes
        g.folders.append(f)
    return sorted(groups.values(), key=lambda g: g.total_bytes, reverse=True)
