"""clean-struct scaffolder -- creates the selected folders and placeholder files.

Quick usage::

    from clean_struct.models import RunOptions
    from clean_struct.registry import get_template
    from clean_struct.scaffolder import FolderScaffolder

    options = RunOptions(framework="react", selected_folders=["components", "pages"])
    result = await FolderScaffolder().run(options, get_template(options.framework), ".")
"""

from clean_struct.scaffolder.files import planned_files, render_index, render_readme
from clean_struct.scaffolder.generator import FolderScaffolder, OutcomeListener

__all__ = [
    "FolderScaffolder",
    "OutcomeListener",
    "planned_files",
    "render_index",
    "render_readme",
]
