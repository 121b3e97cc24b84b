"""Ref classification: split raw ref names into family and version."""

import re

from template_library.core.models.refs import UNDEFINED_VERSION, ResolvedRef
from template_library.core.models.repository import DEFAULT_BRANCH

# Tags of the core repository are named template-library-<version>
CORE_TAG_PREFIX = "template-library"

# -<digits>[.<digits>...][-<qualifier>] at the end of a tag, e.g. -14.2.1 or -14.10.0-rc2
VERSION_SUFFIX_RE = re.compile(r"-(?P<version>\d+(?:\.\d+)*(?:-[A-Za-z0-9]\w*)?)$")


def split_version(tag: str, requested_version: str | None = None) -> tuple[str, str]:
    """Split a tag name into (family, version).

    A tag ending with ``-<requested_version>`` is split there, so a tag
    selected for a version always carries that version. Other tags are
    split at the first dash starting a version suffix. Returns the whole
    tag and UNDEFINED_VERSION when the tag has no version suffix.
    """
    if requested_version:
        suffix = f"-{requested_version}"
        if tag.endswith(suffix) and len(tag) > len(suffix):
            return tag[: -len(suffix)], requested_version

    match = VERSION_SUFFIX_RE.search(tag)
    if match is None or match.start() == 0:
        return tag, UNDEFINED_VERSION
    return tag[: match.start()], match.group("version")


def classify(
    raw_ref: str,
    use_tags: bool,
    rename_master: str | None = None,
    requested_version: str | None = None,
) -> ResolvedRef:
    """Decompose a raw branch or tag name into a ResolvedRef.

    In branch mode the family and the version are the branch name itself.
    In tag mode the trailing version is split off the tag; tags of the
    core repository belong to the single production line and are shown
    as the default branch.
    """
    if not use_tags:
        family = version = raw_ref
        display_family = raw_ref
    else:
        family, version = split_version(raw_ref, requested_version)
        if family.startswith(CORE_TAG_PREFIX):
            display_family = DEFAULT_BRANCH
        else:
            display_family = family

    if rename_master and family == DEFAULT_BRANCH:
        display_family = rename_master

    return ResolvedRef(
        name=raw_ref,
        family=family,
        version=version,
        display_family=display_family,
    )
