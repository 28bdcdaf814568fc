"""
Project scaffolding, loading and content file creation for org-site.

All operations take explicit paths and never change the process working
directory.
"""

import os
import shlex
import shutil
import logging
import subprocess
from typing import Any, Callable, Dict, Optional

from .orgfile import export_options_template, file_stem
from .settings import OrgSiteSettings, SiteConfig, SAMPLE_CONFIG_PATH

logger = logging.getLogger('OrgSite')

CONTENT_DIRS = ['post', 'wiki']
SEED_FILES = ['index', 'about', os.path.join('post', 'post1'), os.path.join('wiki', 'wiki1')]
ORG_SUFFIX = '.org'


class Project:
    """A loaded org-site project: its directory and configuration."""

    def __init__(self, directory: str, config: SiteConfig, config_file: Optional[str] = None):
        self.directory = os.path.abspath(directory)
        self.config = config
        self.config_file = config_file

    def path(self, *parts):
        return os.path.join(self.directory, *parts)

    def __repr__(self):
        return f"Project({self.directory!r}, theme={self.config.theme!r})"


def with_org_suffix(path: str) -> str:
    """Append .org to path when it has no extension."""
    if not os.path.splitext(path)[1]:
        return path + ORG_SUFFIX
    return path


def open_in_editor(path: str) -> None:
    """Open path in $VISUAL or $EDITOR if one is configured."""
    editor = os.environ.get('VISUAL') or os.environ.get('EDITOR')
    if not editor:
        logger.info(f"No editor configured, created: {path}")
        return
    status = subprocess.call(shlex.split(editor) + [path])
    if status != 0:
        logger.warning(f"Editor exited with status {status} for {path}")


def new_org_file(path: str, view: bool = False, config: Optional[SiteConfig] = None) -> str:
    """
    Create a new Org file with export-option boilerplate.

    Args:
        path: File to create; ".org" is appended when it has no extension
        view: Open the created file in the user's editor
        config: Loaded site configuration supplying author, email and language

    Returns:
        Path of the created file

    Raises:
        FileExistsError: If the file already exists
    """
    path = with_org_suffix(path)
    if os.path.exists(path):
        raise FileExistsError(f"File already exists: {path}")

    config = config or SiteConfig()
    boilerplate = export_options_template(
        title=file_stem(path),
        author=config.author_name,
        email=config.author_email,
        language=config.language,
    )

    with open(path, 'x', encoding='utf-8') as f:
        f.write(boilerplate)
    logger.info(f"Created org file: {path}")

    if view:
        open_in_editor(path)
    return path


def new_project(directory: Optional[str] = None, config_source: str = SAMPLE_CONFIG_PATH) -> str:
    """
    Create a new project: content directories, configuration file and seed pages.

    Existing files are not checked for up front; creating a seed page that
    already exists raises FileExistsError and leaves the partial tree in place.

    Returns:
        Absolute path of the project directory
    """
    directory = os.path.abspath(directory or os.getcwd())
    os.makedirs(directory, exist_ok=True)

    for content_dir in CONTENT_DIRS:
        os.makedirs(os.path.join(directory, content_dir), exist_ok=True)
        logger.debug(f"Created directory: {content_dir}")

    config_dest = os.path.join(directory, os.path.basename(config_source))
    shutil.copy2(config_source, config_dest)
    logger.info(f"Created configuration: {config_dest}")

    settings_loader = OrgSiteSettings(directory)
    settings_loader.load_settings()
    config = settings_loader.to_config()
    for seed in SEED_FILES:
        new_org_file(os.path.join(directory, seed), view=False, config=config)

    logger.info(f"Created project: {directory}")
    return directory


def load_project(directory: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Project:
    """
    Load a project's configuration file.

    Non-None values in overrides (e.g. command-line options) take precedence
    over the file's settings.

    Raises:
        FileNotFoundError: If the directory has no configuration file
        ValueError: If the configuration file cannot be parsed
    """
    directory = os.path.abspath(directory or os.getcwd())
    settings_loader = OrgSiteSettings(directory)
    settings_loader.load_settings(required=True)
    project = Project(directory, settings_loader.to_config(overrides), settings_loader.config_file_path)
    logger.info(f"Loaded project: {directory}")
    return project


def _new_content_file(project: Project, subdir: str, filename: Optional[str],
                      view: bool, prompt: Optional[Callable[[str], str]]) -> str:
    if not filename:
        filename = (prompt or input)(f"New {subdir} file: {project.path(subdir)}{os.sep}").strip()
    if not filename:
        raise ValueError("A file name is required")
    return new_org_file(project.path(subdir, filename), view=view, config=project.config)


def new_post(project: Project, filename: Optional[str] = None, view: bool = True,
             prompt: Optional[Callable[[str], str]] = None) -> str:
    """Create a new post under the project's post/ directory, prompting for a name if needed."""
    return _new_content_file(project, 'post', filename, view, prompt)


def new_wiki(project: Project, filename: Optional[str] = None, view: bool = True,
             prompt: Optional[Callable[[str], str]] = None) -> str:
    """Create a new wiki entry under the project's wiki/ directory."""
    return _new_content_file(project, 'wiki', filename, view, prompt)
