from __future__ import annotations

from typing import List, Mapping

from ..core.models import AppRef, Application, PathRef


def format_dependency_graph(applications: Mapping[str, Application]) -> str:
    lines: List[str] = ["Dependency graph:", ""]
    for name in sorted(applications):
        app = applications[name]
        lines.append(name)
        if not app.dependencies:
            lines.append("  └─ (no dependencies)")
        for i, dep in enumerate(app.dependencies):
            prefix = "└─" if i == len(app.dependencies) - 1 else "├─"
            if isinstance(dep, AppRef):
                lines.append(f"  {prefix} {dep.name} (app)")
            elif isinstance(dep, PathRef):
                kind = "file" if dep.path.is_file() else "dir"
                lines.append(f"  {prefix} {dep.path} ({kind})")
            else:
                raise TypeError(f"Unknown dependency kind: {dep!r}")
        lines.append("")
    return "\n".join(lines)
