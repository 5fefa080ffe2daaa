from __future__ import annotations

from semtag.test.architecture._gate import require_arch_checks_enabled
from semtag.test.architecture._utils import (
    iter_source_files,
    matches_prefix,
    package_root,
    parse_imports,
)

# Packages that must not depend on the listed prefixes.
_FORBIDDEN = {
    "core": ("semtag.cli", "semtag.git", "semtag.grammar", "semtag.release", "semtag.output"),
    "platform": ("semtag.cli", "semtag.git", "semtag.grammar", "semtag.release"),
    "git": ("semtag.cli", "semtag.grammar", "semtag.release"),
    "release": ("semtag.cli", "semtag.platform"),
    "grammar": ("semtag.cli", "semtag.git"),
    "output": ("semtag.cli", "semtag.git", "semtag.release"),
}


def test_lower_layers_do_not_import_upper_layers() -> None:
    require_arch_checks_enabled()

    root = package_root()
    offenders: list[str] = []

    for package, forbidden in _FORBIDDEN.items():
        for file_path in iter_source_files(root / package):
            rel = file_path.relative_to(root)
            for item in parse_imports(file_path):
                if any(matches_prefix(item.module, prefix) for prefix in forbidden):
                    offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "Layering violations:\n" + "\n".join(offenders)


def test_resolver_only_sees_the_query_protocol() -> None:
    require_arch_checks_enabled()

    root = package_root()
    path = root / "release" / "resolver.py"
    offenders = [
        f"resolver.py:{item.line}: '{item.module}'"
        for item in parse_imports(path)
        if matches_prefix(item.module, "semtag.git.repository")
    ]

    assert not offenders, "Resolver must depend on VersionControlQuery only:\n" + "\n".join(
        offenders
    )
