"""Framework template registry.

A fixed mapping from :class:`~clean_struct.models.Framework` to the folders
offered for that framework.  Adding a framework means adding an enum member,
an entry in ``TEMPLATES`` and a menu label in ``FRAMEWORK_LABELS``.
"""

from __future__ import annotations

from clean_struct.errors import UnknownFrameworkError
from clean_struct.models import FolderTemplate, Framework, FrameworkTemplate


def _folders(*rows: tuple[str, str, bool]) -> tuple[FolderTemplate, ...]:
    return tuple(
        FolderTemplate(name=name, description=description, default_selected=selected)
        for name, description, selected in rows
    )


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

NEXTJS_TEMPLATE = FrameworkTemplate(
    display_name="Next.js",
    folders=_folders(
        ("components", "Reusable UI components", True),
        ("app", "App Router pages (Next.js 13+)", True),
        ("pages", "Pages Router (Legacy)", False),
        ("public", "Static assets", True),
        ("styles", "CSS/SCSS files", True),
        ("lib", "Utility functions", True),
        ("hooks", "Custom React hooks", True),
        ("services", "API services", True),
        ("types", "TypeScript types", True),
        ("store", "State management", False),
        ("middleware", "Next.js middleware", False),
        ("constants", "App constants", True),
    ),
)

REACT_TEMPLATE = FrameworkTemplate(
    display_name="React",
    folders=_folders(
        ("components", "Reusable components", True),
        ("pages", "Page components", True),
        ("layouts", "Layout wrappers", True),
        ("hooks", "Custom hooks", True),
        ("services", "API calls", True),
        ("utils", "Helper functions", True),
        ("store", "Redux/Zustand", False),
        ("context", "React Context", False),
        ("types", "TypeScript types", True),
        ("assets", "Images, fonts", True),
        ("constants", "Config values", True),
        ("routes", "Route definitions", True),
    ),
)

VITE_TEMPLATE = FrameworkTemplate(
    display_name="Vite (React/Vue)",
    folders=_folders(
        ("components", "UI components", True),
        ("views", "Page views", True),
        ("layouts", "Layouts", True),
        ("composables", "Vue composables/React hooks", True),
        ("services", "API services", True),
        ("utils", "Utilities", True),
        ("store", "Pinia/Redux", False),
        ("types", "TypeScript types", True),
        ("assets", "Static assets", True),
        ("styles", "Global styles", True),
        ("router", "Router config", True),
        ("plugins", "Vite plugins", False),
    ),
)

CUSTOM_TEMPLATE = FrameworkTemplate(
    display_name="Custom",
    folders=_folders(
        ("components", "UI Components", True),
        ("pages", "Page components", True),
        ("layouts", "Layout wrappers", False),
        ("hooks", "Custom hooks", True),
        ("services", "API services", True),
        ("utils", "Helper functions", True),
        ("store", "State management", False),
        ("types", "TypeScript types", True),
        ("assets", "Images, fonts", True),
        ("constants", "Constants", True),
        ("config", "Configuration files", False),
        ("lib", "Library code", False),
        ("api", "API routes", False),
        ("models", "Data models", False),
        ("context", "React Context", False),
    ),
)

TEMPLATES: dict[Framework, FrameworkTemplate] = {
    Framework.NEXTJS: NEXTJS_TEMPLATE,
    Framework.REACT: REACT_TEMPLATE,
    Framework.VITE: VITE_TEMPLATE,
    Framework.CUSTOM: CUSTOM_TEMPLATE,
}

FRAMEWORK_LABELS: dict[Framework, str] = {
    Framework.NEXTJS: "Next.js (React with App Router)",
    Framework.REACT: "React (Create React App / React)",
    Framework.VITE: "Vite (React/Vue)",
    Framework.CUSTOM: "Custom (pick your own)",
}


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def available_frameworks() -> list[Framework]:
    """Framework identifiers in menu order."""
    return list(TEMPLATES)


def get_template(framework: Framework | str) -> FrameworkTemplate:
    """Return the template registered for *framework*.

    Args:
        framework: A :class:`Framework` member or its string value
            (e.g. ``"react"``).

    Raises:
        UnknownFrameworkError: If *framework* is not a registered identifier.
    """
    try:
        key = Framework(framework)
    except ValueError:
        raise UnknownFrameworkError(framework) from None
    template = TEMPLATES.get(key)
    if template is None:
        raise UnknownFrameworkError(framework)
    return template
