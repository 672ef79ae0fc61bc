"""Known editors and lookup by slug."""

from __future__ import annotations

from collections.abc import Iterable

from waka.editors.base import EditorPlugin
from waka.editors.jetbrains import JetBrainsFamily
from waka.editors.vscode import VsCodeFamily
from waka.editors.zed import Zed

_JETBRAINS = (
    JetBrainsFamily("IntelliJ IDEA", "intellij-idea", ("IntelliJIdea", "IdeaIC"), "idea",
                    ("IntelliJ IDEA", "IntelliJ IDEA CE", "IntelliJ IDEA Ultimate")),
    JetBrainsFamily("PyCharm", "pycharm", ("PyCharm", "PyCharmCE"), "pycharm",
                    ("PyCharm", "PyCharm CE", "PyCharm Professional Edition")),
    JetBrainsFamily("WebStorm", "webstorm", ("WebStorm",), "webstorm", ("WebStorm",)),
    JetBrainsFamily("GoLand", "goland", ("GoLand",), "goland", ("GoLand",)),
    JetBrainsFamily("PhpStorm", "phpstorm", ("PhpStorm",), "phpstorm", ("PhpStorm",)),
    JetBrainsFamily("RubyMine", "rubymine", ("RubyMine",), "rubymine", ("RubyMine",)),
    JetBrainsFamily("CLion", "clion", ("CLion",), "clion", ("CLion",)),
    JetBrainsFamily("Rider", "rider", ("Rider",), "rider", ("Rider", "JetBrains Rider")),
    JetBrainsFamily("DataGrip", "datagrip", ("DataGrip",), "datagrip", ("DataGrip",)),
    JetBrainsFamily("RustRover", "rustrover", ("RustRover",), "rustrover", ("RustRover",)),
)

_VSCODE = (
    VsCodeFamily("VS Code", "vscode", ".vscode", "code",
                 "Visual Studio Code", "Microsoft VS Code"),
    VsCodeFamily("VS Code Insiders", "vscode-insiders", ".vscode-insiders", "code-insiders",
                 "Visual Studio Code - Insiders", "Microsoft VS Code Insiders"),
    VsCodeFamily("VSCodium", "vscodium", ".vscode-oss", "codium", "VSCodium", "VSCodium"),
    VsCodeFamily("Cursor", "cursor", ".cursor", "cursor", "Cursor", "cursor"),
    VsCodeFamily("Windsurf", "windsurf", ".windsurf", "windsurf", "Windsurf", "Windsurf"),
)

_EDITORS: tuple[EditorPlugin, ...] = (*_VSCODE, *_JETBRAINS, Zed())


def list_editors() -> list[EditorPlugin]:
    return list(_EDITORS)


def editor_slugs() -> list[str]:
    return [e.slug for e in _EDITORS]


def get_editor(slug: str) -> EditorPlugin | None:
    """Get an editor adapter by slug."""
    for editor in _EDITORS:
        if editor.slug == slug:
            return editor
    return None


def get_editors(slugs: Iterable[str]) -> list[EditorPlugin]:
    """Resolve slugs to adapters, preserving order. Raises KeyError on unknown slugs."""
    editors = []
    for slug in slugs:
        editor = get_editor(slug)
        if editor is None:
            raise KeyError(slug)
        editors.append(editor)
    return editors
